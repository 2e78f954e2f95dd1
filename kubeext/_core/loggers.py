"""
Logging setup for the applications & scripts using the library.

The library itself only logs to its own loggers (``kubeext.*``) and never
configures the logging system: it is the application's decision.
For convenience, `configure` sets up a typical console logging
with plain-text or JSON formats (the latter via ``python-json-logger``).
"""
import enum
import logging
from typing import Any, Optional, Union

import pythonjsonlogger.jsonlogger


class LogFormat(enum.Enum):
    """ Log formats, as used by `configure`. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = enum.auto()


class JsonFormatter(pythonjsonlogger.jsonlogger.JsonFormatter):  # type: ignore
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: Union[LogFormat, str] = LogFormat.FULL,
) -> None:
    log_level = 'DEBUG' if debug or verbose else 'WARNING' if quiet else 'INFO'
    formatter = make_formatter(log_format=log_format)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.addHandler(handler)
    logger.setLevel(log_level)

    # Prevent the low-level logging unless in the debug mode. Keep only the library's messages.
    # For no-propagation loggers, add a dummy null handler to prevent printing the messages.
    for name in ['asyncio', 'aiohttp']:
        logger = logging.getLogger(name)
        logger.propagate = bool(debug)
        if not debug:
            logger.handlers[:] = [logging.NullHandler()]


def make_formatter(
        log_format: Union[LogFormat, str] = LogFormat.FULL,
) -> logging.Formatter:
    if log_format is LogFormat.JSON:
        return JsonFormatter()
    elif isinstance(log_format, LogFormat):
        return logging.Formatter(log_format.value)
    elif isinstance(log_format, str):
        return logging.Formatter(log_format)
    else:
        raise ValueError(f"Unsupported log format: {log_format!r}")
