"""Action classification — thunk, deferred or plain."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from enum import Enum
from typing import Any


class ActionKind(str, Enum):
    """The three action shapes a stage distinguishes."""

    THUNK = "thunk"
    DEFERRED = "deferred"
    PLAIN = "plain"


def is_thenable(value: Any) -> bool:
    """Return True if *value* exposes a callable ``then`` member.

    Mappings qualify through a callable ``"then"`` entry, so record-style
    actions such as ``{"then": fn}`` are promise-shaped too.

    Never raises: a ``then`` lookup that fails counts as not thenable.
    """
    if value is None:
        return False
    try:
        if isinstance(value, Mapping):
            then = value.get("then")
        else:
            then = getattr(value, "then", None)
    except Exception:  # noqa: BLE001 - arbitrary __getattr__/property code
        return False
    return callable(then)


def is_deferred(value: Any, *, include_awaitables: bool = False) -> bool:
    """Return True if *value* represents a result that is not yet available.

    Thenables always qualify. With *include_awaitables*, so do coroutines,
    futures, tasks and anything else :func:`inspect.isawaitable` accepts.
    """
    if is_thenable(value):
        return True
    if not include_awaitables:
        return False
    try:
        return inspect.isawaitable(value)
    except Exception:  # noqa: BLE001
        return False


def classify(action: Any, *, include_awaitables: bool = False) -> ActionKind:
    """Classify *action* by its runtime shape.

    Callables are thunks even when they also expose ``then``.
    """
    if callable(action):
        return ActionKind.THUNK
    if is_deferred(action, include_awaitables=include_awaitables):
        return ActionKind.DEFERRED
    return ActionKind.PLAIN


def describe_action(action: Any) -> str:
    """Short display name for *action*, for log messages.

    Callables use their ``__qualname__``; records use their ``type`` field
    or key. Never raises: falls back to the name of the action's class.
    """
    try:
        if callable(action):
            name = getattr(action, "__qualname__", None)
        elif isinstance(action, Mapping):
            name = action.get("type")
        else:
            name = getattr(action, "type", None)
        if name is not None:
            return str(name)
    except Exception:  # noqa: BLE001 - arbitrary __getattr__/__str__ code
        pass
    return type(action).__name__
