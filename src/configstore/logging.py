from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class FileRotationSettings(BaseModel):
    """Daily rotation, as done by the standard library's TimedRotatingFileHandler."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = Field(default=5, ge=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[str] = None
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


def init_logging(settings: LoggingSettings = LoggingSettings(), *, logger_name: str = "configstore") -> logging.Logger:
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.level}")

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.file:
        path = Path(settings.file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path,
            when="midnight",
            backupCount=settings.rotation.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
