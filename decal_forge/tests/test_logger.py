import logging

from decal_forge.core.logger import (
    ROOT_LOGGER_NAME,
    format_context,
    get_logger,
    log_agent_action,
    log_error,
    setup_logger,
)


def test_child_logger_name():
    assert get_logger("painter").name == "decal_forge.painter"


def test_setup_is_idempotent():
    """Test calling setup again does not duplicate handlers."""
    setup_logger()
    count = len(logging.getLogger(ROOT_LOGGER_NAME).handlers)
    setup_logger()
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == count == 3


def test_format_context():
    assert format_context(None) == ""
    assert format_context({"prompt": "a fox", "n": 2}) == " | prompt=a fox | n=2"


def test_log_agent_action_failure_marker(caplog):
    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        log_agent_action("painter", "Prompt blocked", "policy violation", success=False)

    record = caplog.records[-1]
    assert record.name == "decal_forge.agent.painter"
    assert record.getMessage() == "[✗] Prompt blocked | policy violation"


def test_log_error_includes_context_and_traceback(caplog):
    with caplog.at_level(logging.ERROR, logger=ROOT_LOGGER_NAME):
        log_error("Generation failed", ValueError("boom"), {"prompt": "a fox"})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "Generation failed: boom | prompt=a fox"
    assert record.exc_info is not None
