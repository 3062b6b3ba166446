"""IDispatchContext / IObserver — contracts with the host container."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDispatchContext(Protocol):
    """The ``dispatch``/``get_state`` pair a host container hands to a stage.

    Owned by the container. Stages keep a reference for their lifetime and
    never mutate it.
    """

    def dispatch(self, action: Any) -> Any:
        """Send *action* through the full pipeline, from the top."""
        ...

    def get_state(self) -> Any:
        """Return the current state snapshot."""
        ...


@runtime_checkable
class IObserver(Protocol):
    """Callback notified when a stage sees a deferred value.

    Parameters
    ----------
    deferred:
        The pending, promise-shaped value. It is never awaited by the stage.
    action:
        The action that was dispatched.
    store:
        The dispatch context the stage was bound to.

    The return value is discarded.
    """

    def __call__(
        self,
        deferred: Any,
        action: Any,
        store: IDispatchContext,
    ) -> object: ...
