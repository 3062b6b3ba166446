"""promised-thunk — thunk middleware that reports deferred results.

Zero infrastructure dependencies. pydantic for stage configuration.
"""

from __future__ import annotations

# ── Classification ───────────────────────────────────────────────
from .classification import (
    ActionKind,
    classify,
    describe_action,
    is_deferred,
    is_thenable,
)

# ── Configuration ────────────────────────────────────────────────
from .config import DEFERRED_POLICY, THUNK_POLICY, StageConfig

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    create_logging_stage,
    create_stage,
    deferred_stage,
    thunk_stage,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import ActionHandler, IDispatchContext, IObserver, NextStage, Stage

# ── Primitives ──────────────────────────────────────────────────
from .primitives import PromisedThunkError, StoreContractError

__all__: list[str] = [
    # Classification
    "ActionKind",
    "classify",
    "describe_action",
    "is_deferred",
    "is_thenable",
    # Configuration
    "DEFERRED_POLICY",
    "StageConfig",
    "THUNK_POLICY",
    # Middleware
    "create_logging_stage",
    "create_stage",
    "deferred_stage",
    "thunk_stage",
    # Ports
    "ActionHandler",
    "IDispatchContext",
    "IObserver",
    "NextStage",
    "Stage",
    # Primitives
    "PromisedThunkError",
    "StoreContractError",
]
