"""
Static (direct-call) range traversal.

The loop calls the caller's callable as-is: no wrapper, no boxing.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from overheadbench.dispatch.types import IndexRange

T = TypeVar("T")


def _require_callable(callback: Any) -> None:
    if not callable(callback):
        raise TypeError(
            f"callback must be callable, got {type(callback).__name__}"
        )


def traverse_static(index_range: IndexRange, callback: Callable[[int], Any]) -> None:
    """Invoke ``callback`` directly for each index in the range.

    Args:
        index_range: Range of indices to visit.
        callback: Per-element work.

    Raises:
        TypeError: If callback is not callable.
    """
    _require_callable(callback)
    for i in range(index_range.length):
        callback(i)


def traverse_items(items: Iterable[T], callback: Callable[[T], Any]) -> None:
    """Invoke ``callback`` directly for each element of ``items``, in order.

    Raises:
        TypeError: If callback is not callable.
    """
    _require_callable(callback)
    for item in items:
        callback(item)
