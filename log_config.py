"""
Logging configuration for the posture check tools.

One call to ``setup_logging`` at the entry point; modules keep using
``logging.getLogger(__name__)``.
"""

import json
import logging
import os
import sys
from datetime import datetime
from typing import Dict, Optional, Union


class JsonFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    json_output: bool = False,
    log_file: Optional[str] = None,
    module_levels: Optional[Dict[str, int]] = None,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Base log level, as a number or a name such as "DEBUG"
        json_output: Emit JSON lines instead of plain text
        log_file: Optional file to also write logs to
        module_levels: Per-logger overrides
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if json_output:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
        )

    # stderr keeps stdout clean for the report itself.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if module_levels:
        for module, module_level in module_levels.items():
            logging.getLogger(module).setLevel(module_level)

    logging.getLogger("absl").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
