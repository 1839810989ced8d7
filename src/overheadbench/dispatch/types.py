"""
Core types for range traversal.

Defines:
- DispatchMode: Enum of callback dispatch strategies
- IndexRange: Bounded integer range handed to a traversal
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DispatchMode(Enum):
    """Callback dispatch strategy for a traversal.

    - STATIC: The callback is invoked directly by the loop.
    - DYNAMIC: The callback is boxed behind a type-erased wrapper and
      every invocation goes through the wrapper.
    """
    STATIC = auto()
    DYNAMIC = auto()


@dataclass(frozen=True, slots=True)
class IndexRange:
    """Immutable range of indices ``0 .. length - 1``.

    Attributes:
        length: Number of indices to visit.
        cursor: Position marker carried alongside the range. Traversal
            always starts at index 0.
    """
    length: int
    cursor: int = 0

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")

    def __len__(self) -> int:
        return self.length
