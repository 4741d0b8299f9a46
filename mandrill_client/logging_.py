from __future__ import annotations

import logging
import sys

LOGGER_NAME = "mandrill_client"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    def __init__(self) -> None:
        super().__init__(sys.stderr)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    # httpx request lines stay out of the debug trail unless the host configured them
    for name in ("httpx", "httpcore"):
        other = logging.getLogger(name)
        if other.level == logging.NOTSET:
            other.setLevel(logging.WARNING)
