"""Exceptions raised by promised-thunk."""

from __future__ import annotations


class PromisedThunkError(Exception):
    """Root exception for the promised-thunk package."""


class StoreContractError(PromisedThunkError, TypeError):
    """Raised when a store cannot be bound to a stage.

    The store must expose callable ``dispatch`` and ``get_state`` members.
    """

    def __init__(self, store: object, missing: list[str]) -> None:
        self.store = store
        self.missing = missing
        super().__init__(
            f"{type(store).__name__} does not expose callable "
            f"{', '.join(missing)}"
        )
