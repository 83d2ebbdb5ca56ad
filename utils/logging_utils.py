"""
Logging setup for the command-line driver.

Library modules only create loggers with logging.getLogger(__name__);
handlers are installed here, once, by the entry point.
"""
import json
import logging
import sys
from typing import Union


PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def setup_logging(level: Union[int, str] = logging.INFO, json_format: bool = False) -> None:
    """
    Install a stdout handler on the root logger.

    Args:
        level: Level number or name (e.g. 'DEBUG')
        json_format: Emit JSON lines instead of plain text
    """
    if isinstance(level, str):
        level_number = logging.getLevelName(level.upper())
        if not isinstance(level_number, int):
            raise ValueError(f"Unknown log level: '{level}'")
        level = level_number

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
