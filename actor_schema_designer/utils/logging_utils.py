import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def resolve_level(level_name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""
    if not level_name:
        return default
    level = logging.getLevelName(str(level_name).strip().upper())
    return level if isinstance(level, int) else default


class _BelowLevelFilter(logging.Filter):
    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def _stream_handler(stream: TextIO, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Route progress messages to stdout and problems to stderr.

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    ``--dry-run`` prints the generated documents on stdout, so warnings about
    dangling view fields must not be interleaved with the JSON.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    formatter = formatter or logging.Formatter(LOG_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = _stream_handler(sys.stdout, logging.DEBUG, formatter)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))

    root.addHandler(stdout_handler)
    root.addHandler(_stream_handler(sys.stderr, stderr_level, formatter))
