"""
Unit tests for the static and dynamic range traversals.

Both entry points must visit 0 .. n-1 in order, exactly once each, and
differ only in how the callback is dispatched.
"""
from __future__ import annotations

from typing import Callable

import pytest

import overheadbench.dispatch as dispatch_module
from overheadbench.dispatch import (
    DispatchMode,
    ErasedCallable,
    IndexRange,
    traverse,
    traverse_dynamic,
    traverse_items,
    traverse_static,
)

TRAVERSALS = [traverse_static, traverse_dynamic]


@pytest.mark.parametrize("traversal", TRAVERSALS, ids=["static", "dynamic"])
class TestRangeTraversal:
    """Behavior shared by both traversal entry points."""

    def test_visits_indices_in_order(
        self,
        traversal: Callable,
        recorder: tuple[list[int], Callable[[int], None]],
    ) -> None:
        seen, record = recorder

        traversal(IndexRange(10), record)

        assert seen == list(range(10))

    def test_empty_range_never_calls(self, traversal: Callable) -> None:
        calls = [0]

        def count(_index: int) -> None:
            calls[0] += 1

        traversal(IndexRange(0), count)

        assert calls[0] == 0

    def test_cursor_does_not_shift_start(
        self,
        traversal: Callable,
        recorder: tuple[list[int], Callable[[int], None]],
    ) -> None:
        seen, record = recorder

        traversal(IndexRange(3, cursor=7), record)

        assert seen == [0, 1, 2]

    def test_accumulates_sum(self, traversal: Callable) -> None:
        total = 0

        def accumulate(i: int) -> None:
            nonlocal total
            total += i

        traversal(IndexRange(10), accumulate)

        assert total == 45

    def test_non_callable_rejected(self, traversal: Callable) -> None:
        with pytest.raises(TypeError):
            traversal(IndexRange(3), 42)

    def test_callback_error_propagates(self, traversal: Callable) -> None:
        def explode(i: int) -> None:
            if i == 2:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            traversal(IndexRange(5), explode)

    def test_accepts_erased_callback(
        self,
        traversal: Callable,
        recorder: tuple[list[int], Callable[[int], None]],
    ) -> None:
        seen, record = recorder

        traversal(IndexRange(4), ErasedCallable(record))

        assert seen == [0, 1, 2, 3]

    def test_accepts_callable_object(self, traversal: Callable) -> None:
        class Collector:
            def __init__(self) -> None:
                self.items: list[int] = []

            def __call__(self, index: int) -> None:
                self.items.append(index)

        collector = Collector()
        traversal(IndexRange(3), collector)

        assert collector.items == [0, 1, 2]


class TestDispatchPath:
    """Dynamic traversal goes through the box on every element; static never does."""

    @pytest.fixture
    def box_calls(self, monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
        calls: list[tuple] = []
        forward = ErasedCallable.__call__

        def counting_call(self, *args):
            calls.append(args)
            return forward(self, *args)

        monkeypatch.setattr(ErasedCallable, "__call__", counting_call)
        return calls

    def test_dynamic_calls_box_per_element(self, box_calls: list[tuple]) -> None:
        seen: list[int] = []

        traverse_dynamic(IndexRange(6), seen.append)

        assert box_calls == [(i,) for i in range(6)]
        assert seen == list(range(6))

    def test_dynamic_empty_range_never_calls_box(self, box_calls: list[tuple]) -> None:
        traverse_dynamic(IndexRange(0), lambda i: None)

        assert box_calls == []

    def test_static_never_boxes(self, box_calls: list[tuple]) -> None:
        seen: list[int] = []

        traverse_static(IndexRange(6), seen.append)

        assert box_calls == []
        assert seen == list(range(6))

    def test_items_never_boxes(self, box_calls: list[tuple]) -> None:
        seen: list[str] = []

        traverse_items(["a", "b"], seen.append)

        assert box_calls == []

    def test_front_door_modes(self, box_calls: list[tuple]) -> None:
        traverse(IndexRange(3), lambda i: None, mode=DispatchMode.STATIC)
        assert box_calls == []

        traverse(IndexRange(3), lambda i: None, mode=DispatchMode.DYNAMIC)
        assert len(box_calls) == 3


class TestTraverseFrontDoor:
    """traverse() routes to the entry point selected by mode."""

    def test_default_is_static(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[str] = []
        monkeypatch.setattr(
            dispatch_module, "traverse_static", lambda r, cb: calls.append("static")
        )
        monkeypatch.setattr(
            dispatch_module, "traverse_dynamic", lambda r, cb: calls.append("dynamic")
        )

        traverse(IndexRange(1), print)

        assert calls == ["static"]

    def test_dynamic_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[str] = []
        monkeypatch.setattr(
            dispatch_module, "traverse_static", lambda r, cb: calls.append("static")
        )
        monkeypatch.setattr(
            dispatch_module, "traverse_dynamic", lambda r, cb: calls.append("dynamic")
        )

        traverse(IndexRange(1), print, mode=DispatchMode.DYNAMIC)

        assert calls == ["dynamic"]

    def test_modes_agree(self) -> None:
        results = {}
        for mode in DispatchMode:
            seen: list[int] = []
            traverse(IndexRange(25), seen.append, mode=mode)
            results[mode] = seen

        assert results[DispatchMode.STATIC] == results[DispatchMode.DYNAMIC]


class TestTraverseItems:
    """Static traversal over arbitrary iterables."""

    def test_sums_sequence(self) -> None:
        total = 0

        def accumulate(x: int) -> None:
            nonlocal total
            total += x

        traverse_items([1, 2, 3], accumulate)

        assert total == 6

    def test_preserves_order(self) -> None:
        seen: list[str] = []

        traverse_items(iter(["a", "b", "c"]), seen.append)

        assert seen == ["a", "b", "c"]

    def test_empty_iterable(self) -> None:
        seen: list[int] = []

        traverse_items([], seen.append)

        assert seen == []

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError):
            traverse_items([1], None)  # type: ignore[arg-type]
