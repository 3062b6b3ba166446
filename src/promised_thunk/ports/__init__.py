"""Ports: protocols shared by stages and host containers."""

from __future__ import annotations

from .stage import ActionHandler, NextStage, Stage
from .store import IDispatchContext, IObserver

__all__ = [
    "ActionHandler",
    "IDispatchContext",
    "IObserver",
    "NextStage",
    "Stage",
]
