import logging
import sys
from typing import Optional


def _stream_handler(stream, level: int, formatter: logging.Formatter, below: Optional[int] = None) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    if below is not None:
        handler.addFilter(lambda record: record.levelno < below)
    return handler


def configure_split_stream_logging(
    logger_name: str,
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """Attach stdout/stderr handlers to the named logger.

    Records below stderr_level go to stdout, the rest to stderr. Existing
    handlers on that logger are replaced.
    """
    formatter = formatter or logging.Formatter("%(name)s - %(levelname)s - %(message)s")
    stderr_level = max(stderr_level, logging.DEBUG)

    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)
    target.addHandler(_stream_handler(sys.stdout, logging.DEBUG, formatter, below=stderr_level))
    target.addHandler(_stream_handler(sys.stderr, stderr_level, formatter))
    return target
