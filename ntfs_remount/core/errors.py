#!/usr/bin/env python3
"""
Error taxonomy for ntfs-remount.
Every error carries the process exit code it maps to.
"""

from enum import IntEnum

class ErrorKind(IntEnum):
    """Failure categories, valued by exit code"""
    INSUFFICIENT_PRIVILEGE = 10
    NO_DRIVE_CONNECTED = 20
    PARSING_ERROR = 30
    MOUNTING_ERROR = 40

HELP_EXIT_STATUS = 0

class NtfsRemountError(Exception):
    """Base class for all errors that terminate a run"""

    kind = ErrorKind.MOUNTING_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return int(self.kind)

class InsufficientPrivilegeError(NtfsRemountError):
    kind = ErrorKind.INSUFFICIENT_PRIVILEGE

class NoDriveConnectedError(NtfsRemountError):
    kind = ErrorKind.NO_DRIVE_CONNECTED

class DiskutilParsingError(NtfsRemountError):
    """diskutil output could not be parsed, or a lookup in it failed"""
    kind = ErrorKind.PARSING_ERROR

class MountingError(NtfsRemountError):
    """Unmount, mount point handling or the NTFS-3G driver failed"""
    kind = ErrorKind.MOUNTING_ERROR
