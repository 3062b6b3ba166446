"""create_stage — the thunk/deferred interception stage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..classification import (
    ActionKind,
    classify,
    describe_action,
    is_deferred,
)
from ..config import DEFERRED_POLICY, THUNK_POLICY, StageConfig
from ..primitives.exceptions import StoreContractError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.stage import ActionHandler, NextStage, Stage
    from ..ports.store import IDispatchContext, IObserver


def _bind_store(
    store: IDispatchContext,
) -> tuple[Callable[[Any], Any], Callable[[], Any]]:
    """Read ``dispatch``/``get_state`` once, raising if either is unusable."""
    dispatch = getattr(store, "dispatch", None)
    get_state = getattr(store, "get_state", None)
    missing = [
        name
        for name, member in (("dispatch", dispatch), ("get_state", get_state))
        if not callable(member)
    ]
    if missing:
        raise StoreContractError(store, missing)
    return dispatch, get_state


def create_stage(
    observer: IObserver | None = None,
    *,
    config: StageConfig | None = None,
) -> Stage:
    """Build a stage that invokes thunks and reports deferred values.

    The returned callable has the curried pipeline shape
    ``store -> next_stage -> action -> result``.

    Per action, exactly one of these runs:

    1. **Thunk** (callable action): ``action(dispatch, get_state)`` is
       invoked and its result returned. If the result is deferred the
       observer is called with ``(result, action, store)``. The action never
       reaches ``next_stage``.
    2. **Deferred action** (promise-shaped, not callable): the observer is
       called with ``(action, action, store)``, then the action is forwarded
       to ``next_stage``. The action itself is reported as the deferred value.
    3. **Plain action**: forwarded to ``next_stage``.

    Args:
        observer: Notified about deferred values; its return value is
            discarded. ``None`` or a non-callable value disables notification.
        config: Classification policy. Defaults to ``StageConfig()``.
    """
    cfg = config if config is not None else StageConfig()
    logger = logging.getLogger(cfg.logger_name)

    notify: IObserver | None = observer if callable(observer) else None
    if observer is not None and notify is None:
        logger.debug(
            "Ignoring non-callable observer of type %s", type(observer).__name__
        )

    def _route(action: Any) -> ActionKind:
        kind = classify(action, include_awaitables=cfg.include_awaitables)
        if kind is ActionKind.THUNK and not cfg.invoke_thunks:
            # Thunk handling is off: judge the callable by its other shape.
            if is_deferred(action, include_awaitables=cfg.include_awaitables):
                return ActionKind.DEFERRED
            return ActionKind.PLAIN
        if kind is ActionKind.DEFERRED and not cfg.notify_deferred_actions:
            return ActionKind.PLAIN
        return kind

    def _report_deferred_action(action: Any, store: IDispatchContext) -> None:
        if notify is None:
            return
        if not cfg.isolate_observer_errors:
            notify(action, action, store)
            return
        try:
            notify(action, action, store)
        except Exception as exc:  # noqa: BLE001 - forwarding is already decided
            logger.warning(
                "Observer failed for deferred action %s: %s",
                describe_action(action),
                exc,
                exc_info=exc,
            )

    def stage(store: IDispatchContext) -> Callable[[NextStage], ActionHandler]:
        dispatch, get_state = _bind_store(store)
        logger.debug("Stage bound to %s", type(store).__name__)

        def bind_next(next_stage: NextStage) -> ActionHandler:
            def handle(action: Any) -> Any:
                kind = _route(action)

                if kind is ActionKind.THUNK:
                    logger.debug("Invoking thunk %s", describe_action(action))
                    result = action(dispatch, get_state)
                    if notify is not None and is_deferred(
                        result, include_awaitables=cfg.include_awaitables
                    ):
                        notify(result, action, store)
                    return result

                if kind is ActionKind.DEFERRED:
                    _report_deferred_action(action, store)

                return next_stage(action)

            return handle

        return bind_next

    return stage


def thunk_stage(observer: IObserver | None = None) -> Stage:
    """Stage that invokes thunks and forwards every other action untouched."""
    return create_stage(observer, config=THUNK_POLICY)


def deferred_stage(observer: IObserver | None = None) -> Stage:
    """Stage that forwards every action and reports deferred ones."""
    return create_stage(observer, config=DEFERRED_POLICY)
