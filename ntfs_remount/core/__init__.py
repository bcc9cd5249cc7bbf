"""
Core utilities: logging, shell execution, system commands and errors.
"""

from .errors import (
    ErrorKind,
    NtfsRemountError,
    InsufficientPrivilegeError,
    NoDriveConnectedError,
    DiskutilParsingError,
    MountingError,
)
from .logger import setup_logging, get_logger
from .system import SystemCommands

__all__ = [
    "ErrorKind",
    "NtfsRemountError",
    "InsufficientPrivilegeError",
    "NoDriveConnectedError",
    "DiskutilParsingError",
    "MountingError",
    "setup_logging",
    "get_logger",
    "SystemCommands",
]
