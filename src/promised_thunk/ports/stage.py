"""Stage shapes — the curried middleware protocol of the host pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .store import IDispatchContext

NextStage = Callable[[Any], Any]
"""The rest of the pipeline: takes an action, returns its result."""

ActionHandler = Callable[[Any], Any]
"""A stage bound to a store and a continuation, invoked once per action."""

Stage = Callable[[IDispatchContext], Callable[[NextStage], ActionHandler]]
"""``store -> next_stage -> action -> result``.

First application binds the store, second binds the continuation, third
runs per action.
"""
