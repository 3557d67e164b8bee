"""
A mergeable priority queue built on a leftist heap.

>>> heap = LeftistHeap([5, 3, 8, 1])
>>> heap.top()
8
>>> heap.pop()
8
>>> heap.top(), heap.size()
(5, 3)

>>> other = LeftistHeap([10, 2])
>>> heap.merge(other)
>>> heap.top(), heap.size(), other.empty()
(10, 5, True)
"""

import copy
import logging
import operator

logger = logging.getLogger(__name__)


class HeapError(Exception):
    pass


class EmptyHeap(HeapError):
    pass


class LeftistHeap(object):
    """
    Max-heap ordered by a comparator.

    The comparator is a callable compare(a, b) returning a true value
    when a ranks below b. It defaults to operator.lt, so the largest
    element is on top. Alternatively a key function can be given, in
    which case elements are ranked by key(a) < key(b).

    >>> LeftistHeap(["b", "aaa", "cc"], key=len).top()
    'aaa'
    >>> LeftistHeap([1, 2, 3], compare=operator.gt).top()
    1

    Exceptions raised by the comparator propagate unchanged, and the
    heap (or both heaps, for merge) is left exactly as it was before
    the failing call.
    """

    __slots__ = "_root", "_size", "_compare"

    def __init__(self, iterable=(), compare=None, key=None):
        if compare is not None and key is not None:
            raise TypeError("compare and key are mutually exclusive")

        if key is not None:
            compare = _KeyCompare(key)
        elif compare is None:
            compare = operator.lt

        self._root = None
        self._size = 0
        self._compare = compare

        for value in iterable:
            self.push(value)

    def __repr__(self):
        return "{0}(size={1})".format(type(self).__name__, self._size)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def size(self):
        return self._size

    def empty(self):
        return self._size == 0

    def top(self):
        """
        Return the top element without removing it.

        >>> LeftistHeap().top()
        Traceback (most recent call last):
            ...
        meldheap.heap.EmptyHeap: empty heap
        """

        if self._root is None:
            raise EmptyHeap("empty heap")
        return self._root.value

    def push(self, value):
        node = _Node(value)

        try:
            root = _meld(self._root, node, self._compare)
        except Exception:
            logger.debug("comparator failed during push, heap left unchanged")
            raise

        self._root = root
        self._size += 1

    def pop(self):
        """
        Remove the top element and return it.
        """

        old = self._root
        if old is None:
            raise EmptyHeap("empty heap")

        try:
            root = _meld(old.left, old.right, self._compare)
        except Exception:
            logger.debug("comparator failed during pop, heap left unchanged")
            raise

        self._root = root
        self._size -= 1

        old.left = None
        old.right = None
        return old.value

    def merge(self, other):
        """
        Move every element of other into this heap, leaving other empty.

        Merging a heap with itself does nothing. Both heaps must be
        ordered the same way: the same compare callable, or equal key
        functions.

        >>> LeftistHeap([1], compare=operator.gt).merge(LeftistHeap([2]))
        Traceback (most recent call last):
            ...
        meldheap.heap.HeapError: cannot merge heaps with different orderings
        """

        if not isinstance(other, LeftistHeap):
            raise TypeError("can only merge with another {0}, not {1!r}".format(
                type(self).__name__, type(other).__name__))
        if other is self:
            return
        if other._compare != self._compare:
            raise HeapError("cannot merge heaps with different orderings")

        try:
            root = _meld(self._root, other._root, self._compare)
        except Exception:
            logger.debug("comparator failed during merge, both heaps left unchanged")
            raise

        self._root = root
        self._size += other._size

        other._root = None
        other._size = 0

    def __iadd__(self, other):
        self.merge(other)
        return self

    def clear(self):
        self._root = None
        self._size = 0

    def copy(self):
        """
        Return a heap with its own nodes, sharing the element values
        and the comparator with this heap.
        """

        result = self._blank()
        result._compare = self._compare
        result._root = _clone(self._root)
        result._size = self._size
        return result

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        result = self._blank()
        memo[id(self)] = result

        result._compare = copy.deepcopy(self._compare, memo)
        result._root = _clone(self._root, lambda value: copy.deepcopy(value, memo))
        result._size = self._size
        return result

    def _blank(self):
        result = type(self).__new__(type(self))
        result._root = None
        result._size = 0
        result._compare = None
        return result

    def assign(self, other):
        """
        Replace the contents of this heap with a copy of other's nodes,
        and its comparator with other's.

        The copy is built completely before anything in this heap is
        touched. Assigning a heap to itself does nothing.
        """

        if not isinstance(other, LeftistHeap):
            raise TypeError("can only assign from another {0}, not {1!r}".format(
                type(self).__name__, type(other).__name__))
        if other is self:
            return

        tmp = other.copy()
        self._root, self._size, self._compare = tmp._root, tmp._size, tmp._compare


class _Node(object):
    __slots__ = "value", "left", "right", "dist"

    def __init__(self, value, dist=1):
        self.value = value
        self.left = None
        self.right = None
        self.dist = dist


def _identity(value):
    return value


class _KeyCompare(object):
    __slots__ = "key",

    def __init__(self, key):
        self.key = key

    def __call__(self, left, right):
        key = self.key
        return key(left) < key(right)

    def __eq__(self, other):
        if not isinstance(other, _KeyCompare):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __deepcopy__(self, memo):
        return _KeyCompare(copy.deepcopy(self.key, memo))


def _npl(node):
    if node is None:
        return 0
    return node.dist


def _meld(a, b, compare):
    if a is None:
        return b
    if b is None:
        return a

    if compare(a.value, b.value):
        a, b = b, a

    # Nothing below is written until the right spine has been melded.
    right = _meld(a.right, b, compare)
    a.right = right

    if _npl(a.left) < _npl(a.right):
        a.left, a.right = a.right, a.left
    a.dist = _npl(a.right) + 1
    return a


def _clone(node, copy_value=_identity):
    """
    Return a structurally identical copy of the tree rooted at node.

    Iterative, as left spines can be as long as the heap itself.
    """

    if node is None:
        return None

    root = _Node(copy_value(node.value), node.dist)
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()

        if source.left is not None:
            target.left = _Node(copy_value(source.left.value), source.left.dist)
            stack.append((source.left, target.left))

        if source.right is not None:
            target.right = _Node(copy_value(source.right.value), source.right.dist)
            stack.append((source.right, target.right))
    return root
