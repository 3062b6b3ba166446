"""Middleware stages."""

from .logging import create_logging_stage
from .stage import create_stage, deferred_stage, thunk_stage

__all__ = [
    "create_logging_stage",
    "create_stage",
    "deferred_stage",
    "thunk_stage",
]
