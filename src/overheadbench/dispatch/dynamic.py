"""
Dynamic (type-erased) range traversal.

The callback is boxed into an ErasedCallable before the loop starts, so
every element pays one indirect call through the box.
"""
from __future__ import annotations

from overheadbench.dispatch.protocols import IndexCallback, erase
from overheadbench.dispatch.types import IndexRange


def traverse_dynamic(index_range: IndexRange, callback: IndexCallback) -> None:
    """Invoke ``callback`` through a type-erased box for each index.

    Args:
        index_range: Range of indices to visit.
        callback: Per-element work; boxed if not already erased.

    Raises:
        TypeError: If callback is not callable.
    """
    boxed = erase(callback)
    for i in range(index_range.length):
        boxed(i)
