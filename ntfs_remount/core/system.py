#!/usr/bin/env python3
"""
System command layer.
Every interaction with the OS (diskutil, mount points, the NTFS-3G driver)
goes through SystemCommands so the mount logic can run against a fake.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple

from .logger import get_logger
from .shell_executor import run_command, check_command_available

logger = get_logger(__name__)

DISKUTIL = "diskutil"

class SystemCommands:
    """Thin wrapper around the macOS tools used to remount drives"""

    def is_privileged(self) -> bool:
        """True when running with an effective UID of root"""
        return os.geteuid() == 0

    def list_disks(self) -> Tuple[bool, str]:
        """
        List all disks and partitions as a property list.

        Returns:
            Tuple of (success, plist text)
        """
        success, stdout, _ = run_command([DISKUTIL, "list", "-plist"], check=False)
        return success, stdout

    def disk_info(self, device_path: str) -> Tuple[bool, str]:
        """
        Get information on a single device as a property list.

        Args:
            device_path: Device node, e.g. "/dev/disk2s1"

        Returns:
            Tuple of (success, plist text)
        """
        success, stdout, _ = run_command(
            [DISKUTIL, "info", "-plist", device_path], check=False
        )
        return success, stdout

    def unmount(self, device_path: str) -> Tuple[bool, str]:
        """Force unmount a device. Returns (success, error output)"""
        success, _, stderr = run_command(
            [DISKUTIL, "unmount", "force", device_path], check=False
        )
        return success, stderr

    def is_empty_directory(self, path: Path) -> bool:
        try:
            return path.is_dir() and not any(path.iterdir())
        except OSError as e:
            logger.debug(f"Could not inspect {path}: {e}")
            return False

    def make_directory(self, path: Path) -> None:
        """Create a single directory. Raises OSError if it exists or cannot be made"""
        path.mkdir()

    def remove_directory(self, path: Path) -> None:
        """Remove an empty directory. Raises OSError on failure"""
        path.rmdir()

    def command_available(self, command: str) -> bool:
        return check_command_available(command)

    def run_driver(self, command: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Run the NTFS-3G driver.

        Args:
            command: Full driver command line

        Returns:
            Tuple of (success, error output if any)
        """
        success, _, stderr = run_command(command, check=False)
        return success, stderr or None
