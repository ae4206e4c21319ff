# tildeshell/logs.py
#
# Logging setup for the shell process.
# Nothing is ever logged to stdout: it would corrupt the prompt and
# interleave with child output.

from __future__ import annotations

import logging
from pathlib import Path

from tildeshell.config import ShellConfig

LOGGER_NAME = "tildeshell"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(config: ShellConfig) -> logging.Logger:
    """
    Attach handlers to the `tildeshell` logger.

    With `log_file` set, records go to that file at `log_level`.
    Otherwise a NullHandler keeps the shell silent.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if not config.log_file:
        logger.setLevel(logging.NOTSET)
        logger.addHandler(logging.NullHandler())
        return logger

    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    path = Path(config.log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(fh)
    logger.setLevel(level)
    return logger
