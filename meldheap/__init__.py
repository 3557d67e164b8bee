from .heap import HeapError, EmptyHeap, LeftistHeap

__version__ = "1.0.0"


__all__ = [
    "__version__",
    "HeapError",
    "EmptyHeap",
    "LeftistHeap"
]
