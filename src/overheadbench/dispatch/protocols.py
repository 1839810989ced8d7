"""
Callback protocol and the type-erased callable wrapper.

The dynamic traversal only relies on the IndexCallback interface and
never on the concrete type of what it calls.
"""
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class IndexCallback(Protocol):
    """Protocol for per-element work accepting one integer index."""

    def __call__(self, index: int) -> Any:
        ...


class ErasedCallable:
    """Boxed callable that hides the wrapped function's concrete type.

    Every call is forwarded through ``__call__``, paying one extra
    indirection compared to calling the target directly.

    Example:
        ```python
        add_two = ErasedCallable(lambda i: i + 2)
        assert add_two(40) == 42
        ```
    """

    __slots__ = ("_target",)

    def __init__(self, target: Callable[..., Any]) -> None:
        """Wrap a callable.

        Args:
            target: Callable to forward calls to.

        Raises:
            TypeError: If target is not callable.
        """
        if not callable(target):
            raise TypeError(
                f"ErasedCallable requires a callable, got {type(target).__name__}"
            )
        self._target = target

    @property
    def target(self) -> Callable[..., Any]:
        """The wrapped callable."""
        return self._target

    def __call__(self, *args: Any) -> Any:
        return self._target(*args)

    def __repr__(self) -> str:
        return f"ErasedCallable({self._target!r})"


def erase(callback: Callable[..., Any]) -> ErasedCallable:
    """Box ``callback`` unless it is already type-erased."""
    if isinstance(callback, ErasedCallable):
        return callback
    return ErasedCallable(callback)
