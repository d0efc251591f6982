"""assoc_files - Install files into per-user config/data directories at build time.

By default, internal logging is disabled when used as a library.
Library users can enable logging by calling assoc_files.enable_logging().
"""

from assoc_files.api import AssociatedFiles
from assoc_files.common import ApplicationIdentity, DirectoryClass, disable_library_logging, enable_library_logging
from assoc_files.installer import install_files, install_user_config, install_user_data
from assoc_files.resolver import resolve, user_config_dir, user_data_dir

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ApplicationIdentity",
    "AssociatedFiles",
    "DirectoryClass",
    "enable_logging",
    "install_files",
    "install_user_config",
    "install_user_data",
    "resolve",
    "user_config_dir",
    "user_data_dir",
]
