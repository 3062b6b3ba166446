import logging
from typing import Any
from unittest.mock import Mock

import pytest

from promised_thunk.middleware import create_logging_stage


def test_logging_stage_logs_and_forwards(caplog) -> None:
    caplog.set_level(logging.INFO)
    next_stage = Mock(return_value="ok")
    handle = create_logging_stage(level=logging.INFO)(Mock())(next_stage)

    assert handle({"type": "increment"}) == "ok"

    next_stage.assert_called_once_with({"type": "increment"})
    assert "Dispatching plain action increment" in caplog.text
    assert "increment completed in" in caplog.text


def test_logging_stage_never_invokes_thunks(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    calls: list[str] = []

    def load_user(dispatch, get_state):
        calls.append("invoked")

    next_stage = Mock(return_value="forwarded")
    handle = create_logging_stage()(Mock())(next_stage)

    assert handle(load_user) == "forwarded"

    assert calls == []
    assert "Dispatching thunk action" in caplog.text
    assert "load_user" in caplog.text


def test_logging_stage_logs_exception(caplog) -> None:
    caplog.set_level(logging.INFO)
    next_stage = Mock(side_effect=ValueError("boom"))
    handle = create_logging_stage()(Mock())(next_stage)

    with pytest.raises(ValueError, match="boom"):
        handle(42)

    assert "int failed after" in caplog.text


def test_logging_stage_uses_given_logger() -> None:
    logger = Mock(spec=logging.Logger)
    handle = create_logging_stage(logger, level=logging.WARNING)(Mock())(Mock())

    handle("ping")

    assert logger.log.call_count == 2
    assert logger.log.call_args_list[0][0][:3] == (
        logging.WARNING,
        "Dispatching %s action %s",
        "plain",
    )


class OpaqueAction:
    def __getattr__(self, name: str) -> Any:
        raise ValueError(name)


def test_logging_stage_forwards_action_with_raising_getattr(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    action = OpaqueAction()
    next_stage = Mock(return_value="forwarded")
    handle = create_logging_stage()(Mock())(next_stage)

    assert handle(action) == "forwarded"

    next_stage.assert_called_once_with(action)
    assert "Dispatching plain action OpaqueAction" in caplog.text
