"""
overheadbench Range Traversal

Two entry points with identical iteration behavior and different
callback dispatch cost:
- traverse_static: direct call per element
- traverse_dynamic: call through a type-erased box per element
"""
from __future__ import annotations

from typing import Any, Callable

from overheadbench.dispatch.types import (
    DispatchMode,
    IndexRange,
)
from overheadbench.dispatch.protocols import (
    ErasedCallable,
    IndexCallback,
    erase,
)
from overheadbench.dispatch.dynamic import traverse_dynamic
from overheadbench.dispatch.static import traverse_items, traverse_static


def traverse(
    index_range: IndexRange,
    callback: Callable[[int], Any],
    mode: DispatchMode = DispatchMode.STATIC,
) -> None:
    """Traverse ``index_range`` with the entry point selected by ``mode``.

    Args:
        index_range: Range of indices to visit.
        callback: Per-element work.
        mode: Dispatch strategy.
    """
    if mode is DispatchMode.DYNAMIC:
        traverse_dynamic(index_range, callback)
    else:
        traverse_static(index_range, callback)


__all__ = [
    # Types
    "DispatchMode",
    "IndexRange",
    # Callbacks
    "ErasedCallable",
    "IndexCallback",
    "erase",
    # Traversal
    "traverse",
    "traverse_dynamic",
    "traverse_static",
    "traverse_items",
]
