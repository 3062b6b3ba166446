"""create_logging_stage — logs actions flowing through the pipeline."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..classification import classify, describe_action

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.stage import ActionHandler, NextStage, Stage
    from ..ports.store import IDispatchContext

_default_logger = logging.getLogger("promised_thunk.middleware.logging")


def create_logging_stage(
    logger: logging.Logger | None = None,
    *,
    level: int = logging.DEBUG,
) -> Stage:
    """Build a stage that logs each action and how long the rest took.

    Always forwards to ``next_stage``; never invokes thunks. Place it after
    a thunk stage to see only what reaches the reducers.
    """
    log = logger or _default_logger

    def stage(store: IDispatchContext) -> Callable[[NextStage], ActionHandler]:
        def bind_next(next_stage: NextStage) -> ActionHandler:
            def handle(action: Any) -> Any:
                kind = classify(action)
                name = describe_action(action)
                log.log(level, "Dispatching %s action %s", kind.value, name)
                start = time.perf_counter()
                try:
                    result = next_stage(action)
                except Exception:
                    elapsed = (time.perf_counter() - start) * 1000
                    log.exception("%s failed after %.2fms", name, elapsed)
                    raise
                elapsed = (time.perf_counter() - start) * 1000
                log.log(level, "%s completed in %.2fms", name, elapsed)
                return result

            return handle

        return bind_next

    return stage
