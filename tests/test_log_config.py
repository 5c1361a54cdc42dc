import json
import logging
import sys

import pytest

from log_config import JsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    logger_levels = {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            logger.setLevel(logger_levels.get(name, logging.NOTSET))
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_level_names():
    setup_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging(level="not-a-level")
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_only_quiets_libraries_in_use():
    setup_logging(module_levels={"scorer": logging.WARNING})
    assert logging.getLogger("scorer").level == logging.WARNING
    assert logging.getLogger("absl").level == logging.WARNING
    assert logging.getLogger("matplotlib").level == logging.NOTSET


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "posture.log"
    setup_logging(json_output=True, log_file=str(log_file))
    logging.getLogger("scorer").info("Total %d", 100)
    for handler in logging.getLogger().handlers:
        handler.flush()
    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "Total 100"
    assert record["name"] == "scorer"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad landmark")
    except ValueError:
        record = logging.getLogger("t").makeRecord(
            "t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    data = json.loads(JsonFormatter().format(record))
    assert data["exception"] == {"type": "ValueError", "message": "bad landmark"}
