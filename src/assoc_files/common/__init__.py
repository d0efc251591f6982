"""Common models and helpers used across assoc_files modules."""

from .fields import NonEmptyString, PathSegment
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, ApplicationIdentity, DirectoryClass

__all__ = [
    "AppInfo",
    "ApplicationIdentity",
    "DirectoryClass",
    "LoggingConfig",
    "NonEmptyString",
    "PathSegment",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
