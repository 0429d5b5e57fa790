"""Utility helpers shared by the API and CLI layers."""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_home_dir", "get_logger", "get_package_version"]
