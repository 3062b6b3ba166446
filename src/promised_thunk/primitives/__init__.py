"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import PromisedThunkError, StoreContractError

__all__ = [
    "PromisedThunkError",
    "StoreContractError",
]
