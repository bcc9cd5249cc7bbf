#!/usr/bin/env python3
"""
Drive enumerator for NTFS volumes.
Uses `diskutil list -plist` to find every partition whose content type
marks it as NTFS.
"""

import plistlib
from xml.parsers.expat import ExpatError
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from ntfs_remount.core.errors import DiskutilParsingError, NoDriveConnectedError
from ntfs_remount.core.logger import get_logger
from ntfs_remount.core.system import SystemCommands

logger = get_logger(__name__)

NTFS_CONTENT_TYPE = "Windows_NTFS"

@dataclass(frozen=True)
class NTFSDrive:
    """A connected NTFS volume"""
    volume_name: str           # e.g., "DATA", empty for an unlabeled volume
    device_identifier: str     # e.g., "disk2s1"
    mount_point: str = ""      # Current mount point, empty if not mounted

def device_path(device_identifier: str) -> str:
    return f"/dev/{device_identifier}"

def _walk_dicts(node: Any) -> Iterator[dict]:
    """Yield every dictionary in a parsed plist, parents before children"""
    if isinstance(node, dict):
        yield node
        for value in node.values():
            yield from _walk_dicts(value)
    elif isinstance(node, list):
        for item in node:
            yield from _walk_dicts(item)

def _load_plist(text: str) -> Any:
    return plistlib.loads(text.encode("utf-8"))

class DriveEnumerator:
    """Lists NTFS drives currently connected to the machine"""

    def __init__(self, system: Optional[SystemCommands] = None):
        self.system = system or SystemCommands()

    def list_available_ntfs_drives(self) -> List[NTFSDrive]:
        """
        List connected NTFS drives in diskutil order.

        Returns:
            List of NTFSDrive, never empty

        Raises:
            NoDriveConnectedError: If diskutil fails or reports no NTFS volume
            DiskutilParsingError: If diskutil output cannot be understood
        """
        logger.info("Scanning for NTFS drives...")

        success, output = self.system.list_disks()
        if not success or not output:
            raise NoDriveConnectedError("No NTFS drive connected.")

        try:
            listing = _load_plist(output)
        except (plistlib.InvalidFileException, ValueError, ExpatError) as e:
            logger.debug(f"Invalid diskutil plist: {e}")
            raise DiskutilParsingError("Unable to get information from available volumes")

        drives = []
        for entry in _walk_dicts(listing):
            if entry.get("Content") != NTFS_CONTENT_TYPE:
                continue

            volume_name = entry.get("VolumeName")
            device_identifier = entry.get("DeviceIdentifier")
            if not isinstance(device_identifier, str) or not device_identifier:
                raise DiskutilParsingError("Unable to get NTFS device identifier")
            if not isinstance(volume_name, str):
                volume_name = ""

            drive = NTFSDrive(
                volume_name=volume_name,
                device_identifier=device_identifier,
                mount_point=str(entry.get("MountPoint") or ""),
            )
            logger.debug(f"Found NTFS drive: {drive}")
            drives.append(drive)

        if not drives:
            raise NoDriveConnectedError("No NTFS drive connected.")

        logger.info(f"Found {len(drives)} NTFS drive(s)")
        return drives

    def get_mount_point(self, device_identifier: str) -> Optional[str]:
        """
        Get current mount point of a device.

        An unreadable answer from diskutil is treated as "not mounted".

        Args:
            device_identifier: Device identifier (e.g., "disk2s1")

        Returns:
            The mount point, or None if the device is not mounted
        """
        success, output = self.system.disk_info(device_path(device_identifier))
        if not success or not output:
            logger.debug(f"No disk information for {device_identifier}")
            return None

        try:
            info = _load_plist(output)
        except (plistlib.InvalidFileException, ValueError, ExpatError) as e:
            logger.debug(f"Invalid diskutil info plist for {device_identifier}: {e}")
            return None

        mount_point = info.get("MountPoint") if isinstance(info, dict) else None
        if isinstance(mount_point, str) and mount_point:
            return mount_point
        return None
