import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from dotargs.utils import get_executable_name, setup_logging


@pytest.mark.usefixtures("reset_logging")
def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


@pytest.mark.usefixtures("reset_logging")
def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "dotargs.log"
    setup_logging(mode="json", log_filename=str(log_file))
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert not isinstance(handlers[0], RichHandler)
    assert isinstance(handlers[0].formatter, pythonjsonlogger.json.JsonFormatter)
    logging.getLogger("dotargs").info("hello")
    for handler in handlers:
        handler.flush()
    assert "[dotargs] [INFO] hello" in log_file.read_text(encoding="UTF-8")


@pytest.mark.usefixtures("reset_logging")
def test_setup_logging_mode_from_environment(monkeypatch):
    monkeypatch.setenv("DOTARGS_LOG_MODE", "cli")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0], RichHandler)


@pytest.mark.usefixtures("reset_logging")
def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["/opt/tools/router.py"], "router"),
        (["router"], "router"),
        ([""], "dotargs"),
        (["-c"], "dotargs"),
        ([], "dotargs"),
    ],
)
def test_get_executable_name(monkeypatch, argv, expected):
    monkeypatch.setattr("sys.argv", argv)
    assert get_executable_name() == expected
