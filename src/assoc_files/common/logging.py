"""Loguru setup.

Library use stays silent until ``enable_library_logging`` is called. The CLI
writes to a log file, rotated by size.
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from assoc_files.constants import APP_NAME

from .models import AppInfo

type Logger = "loguru.Logger"

_LOG_ROTATION = "1 MB"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, default_log_dir: Path | None) -> int | None:
    """Send CLI logs to ``config.log_file`` or ``<default_log_dir>/logs``.

    Returns the handler id, or None when there is nowhere to write.
    """
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    if config.log_file:
        log_file = Path(config.log_file).expanduser()
    elif default_log_dir is not None:
        log_file = default_log_dir / "logs" / f"{APP_NAME}.log"
    else:
        return None

    log_file.parent.mkdir(parents=True, exist_ok=True)
    serialize = config.format == "json"
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=_LOG_ROTATION,
        serialize=serialize,
        format="{message}" if serialize else _text_format(),
        diagnose=(app_info.environment == "dev"),
    )

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    return logger.add(sys.stderr, level=level, format=_text_format(), colorize=False)


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


def _text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
