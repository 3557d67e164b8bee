from setuptools import setup, find_packages

from meldheap import __version__

setup(
    name="meldheap",
    version=__version__,
    description="Mergeable priority queue built on a leftist heap",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.6",
    license="MIT"
)
