"""
Discovery module for detecting NTFS drives and selecting volumes.
"""

from .drive_enumerator import DriveEnumerator, NTFSDrive
from .volume_selector import select_volume_names

__all__ = ["DriveEnumerator", "NTFSDrive", "select_volume_names"]
