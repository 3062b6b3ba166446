"""Shared fixtures — a minimal in-memory container for end-to-end tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

    from promised_thunk.ports import Stage


def counter_reducer(state: int, action: Any) -> int:
    if isinstance(action, dict) and action.get("type") == "increment":
        return state + action.get("by", 1)
    return state


class InMemoryStore:
    """Holds state, runs a reducer and chains stages outermost-first."""

    def __init__(
        self,
        reducer: Callable[[Any, Any], Any],
        initial_state: Any,
        stages: list[Stage] | None = None,
    ) -> None:
        self._reducer = reducer
        self._state = initial_state
        self.reduced: list[Any] = []

        chain: Callable[[Any], Any] = self._reduce
        bound = [stage(self) for stage in stages or []]
        for bind_next in reversed(bound):
            chain = bind_next(chain)
        self._chain = chain

    def _reduce(self, action: Any) -> Any:
        self.reduced.append(action)
        self._state = self._reducer(self._state, action)
        return action

    def dispatch(self, action: Any) -> Any:
        return self._chain(action)

    def get_state(self) -> Any:
        return self._state


class Deferred:
    """A thenable with no callbacks run until ``resolve`` is called."""

    def __init__(self) -> None:
        self.callbacks: list[Callable[[Any], Any]] = []

    def then(self, on_fulfilled: Callable[[Any], Any]) -> Deferred:
        self.callbacks.append(on_fulfilled)
        return self

    def resolve(self, value: Any) -> None:
        for callback in self.callbacks:
            callback(value)


@pytest.fixture
def make_store():
    """Factory for an ``InMemoryStore`` running the counter reducer."""

    def _make(*stages: Stage, initial_state: int = 0) -> InMemoryStore:
        return InMemoryStore(counter_reducer, initial_state, list(stages))

    return _make


@pytest.fixture
def deferred() -> Deferred:
    """A fresh unresolved thenable."""
    return Deferred()
