"""
Loguru sink configuration for applications embedding rxwidgets.

The widgets themselves only call ``from loguru import logger``; this module
decides where those records end up.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Forward records emitted through the standard ``logging`` module to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter jusqu'au vrai appelant, hors du module logging
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None,
                      intercept_stdlib: bool = False) -> List[int]:
    """
    Replace loguru's default sink with the rxwidgets sinks.

    Args:
        level: minimum level for the console sink
        log_dir: when given, a rotating UTF-8 file sink is added there
        intercept_stdlib: route ``logging`` records (e.g. from Qt helpers) into loguru

    Returns:
        The loguru handler ids that were added.
    """
    level = os.environ.get("RXWIDGETS_LOG_LEVEL", level).upper()

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level, format=LOG_FORMAT)]

    if log_dir is not None:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            logs_path / f"rxwidgets_{os.getpid()}.log",
            level="DEBUG",
            format=LOG_FORMAT,
            rotation="10 MB",
            retention=7,
            encoding="utf-8",
        ))

    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.debug(f"Logging configured (level={level}, log_dir={log_dir})")
    return handler_ids
