"""
Storage module for unmounting and mounting NTFS drives.
"""

from .disk_mounter import DiskMounter, MountRequest, MountResult

__all__ = [
    "DiskMounter",
    "MountRequest",
    "MountResult"
]
