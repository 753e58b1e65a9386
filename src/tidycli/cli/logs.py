"""Stdout / stderr logger pair owned by the ``Cli`` façade.

Both loggers prefix each record with a local ``YYYY/MM/DD HH:MM:SS``
timestamp.  They do not propagate to the root logger, and building them
twice for the same name reuses the existing handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT: str = "%(asctime)s %(message)s"
DATE_FORMAT: str = "%Y/%m/%d %H:%M:%S"


def _stream_logger(name: str, stream: TextIO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger


def build_loggers(
    name: str,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> tuple[logging.Logger, logging.Logger]:
    """Return ``(log_out, log_err)`` loggers for program *name*.

    *out* and *err* default to the **current** ``sys.stdout`` and
    ``sys.stderr``, resolved at call time.
    """
    log_out = _stream_logger(f"{name}.out", out or sys.stdout)
    log_err = _stream_logger(f"{name}.err", err or sys.stderr)
    return log_out, log_err
