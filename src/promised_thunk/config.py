"""StageConfig — classification policy for a promised-thunk stage."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LOGGER_NAME = "promised_thunk.middleware"


class StageConfig(BaseModel):
    """Policy applied by :func:`~promised_thunk.middleware.create_stage`.

    The defaults apply the full decision table: thunks are invoked and
    reported when they return a deferred value, and deferred actions are
    reported and forwarded.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    invoke_thunks: bool = True
    notify_deferred_actions: bool = True
    isolate_observer_errors: bool = Field(
        default=True,
        description=(
            "Log and suppress observer failures for deferred actions so the "
            "action is still forwarded. Observer failures for thunk results "
            "always propagate."
        ),
    )
    include_awaitables: bool = False
    logger_name: str = Field(default=DEFAULT_LOGGER_NAME, min_length=1)


THUNK_POLICY = StageConfig(invoke_thunks=True, notify_deferred_actions=False)
"""Invoke thunks and report deferred thunk results; forward everything else."""

DEFERRED_POLICY = StageConfig(invoke_thunks=False, notify_deferred_actions=True)
"""Forward every action; report actions that are already deferred."""
