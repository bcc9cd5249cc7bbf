#!/usr/bin/env python3
"""
Disk mounter for NTFS drives.
Unmounts the macOS read-only mount of each selected volume and mounts it
again in read/write mode with NTFS-3G.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ntfs_remount.config.loader import MountConfig
from ntfs_remount.core.errors import DiskutilParsingError, MountingError
from ntfs_remount.core.logger import get_logger
from ntfs_remount.core.system import SystemCommands
from ntfs_remount.discovery.drive_enumerator import DriveEnumerator, NTFSDrive, device_path

logger = get_logger(__name__)

@dataclass(frozen=True)
class MountRequest:
    """Where a selected volume gets mounted"""
    volume_name: str
    device_identifier: str     # e.g., "disk2s1"
    mount_path: Path           # e.g., "/Volumes/disk2s1"

@dataclass
class MountResult:
    """Result of processing one volume"""
    volume_name: str
    device_identifier: str
    mount_path: Path
    unmounted: bool = False    # True if an existing mount was removed
    mounted: bool = False      # True if NTFS-3G mounted the volume

class DiskMounter:
    """Handles (re-)mounting of NTFS drives in read/write mode"""

    MOUNT_OPTIONS = ("local", "allow_other", "auto_xattr", "auto_cache")

    def __init__(
        self,
        config: MountConfig,
        system: Optional[SystemCommands] = None,
        enumerator: Optional[DriveEnumerator] = None
    ):
        self.config = config
        self.system = system or SystemCommands()
        self.enumerator = enumerator or DriveEnumerator(self.system)

    def process(
        self,
        selected: Sequence[str],
        available: Sequence[NTFSDrive],
        on_result: Optional[Callable[[MountResult], None]] = None,
        on_unmount: Optional[Callable[[MountRequest], None]] = None
    ) -> List[MountResult]:
        """
        Process selected NTFS drives to be (re-)mounted in read/write mode.

        Volumes are handled in order and the first failure aborts the run:
        the error propagates and the remaining volumes are left untouched.

        Args:
            selected: Volume names to process
            available: Currently connected NTFS drives
            on_result: Called with each result as soon as its volume is done
            on_unmount: Called as soon as an existing mount has been removed

        Returns:
            List of MountResult, one per processed volume

        Raises:
            DiskutilParsingError: If a volume name matches no NTFS drive
            MountingError: If unmounting or mounting fails
        """
        if not self.config.unmount_only:
            self._check_driver()

        results = []
        for volume_name in selected:
            if not volume_name:
                continue

            request = self.build_request(volume_name, available)
            result = self.read_write_mount(request, on_unmount)
            results.append(result)
            if on_result:
                on_result(result)

        return results

    def build_request(self, volume_name: str, available: Sequence[NTFSDrive]) -> MountRequest:
        """Resolve the device of a volume name and where to mount it"""
        for drive in available:
            if drive.volume_name == volume_name:
                return MountRequest(
                    volume_name=volume_name,
                    device_identifier=drive.device_identifier,
                    mount_path=self.config.volumes_folder / drive.device_identifier,
                )
        raise DiskutilParsingError(f"Unable to find NTFS device '{volume_name}'")

    def read_write_mount(
        self,
        request: MountRequest,
        on_unmount: Optional[Callable[[MountRequest], None]] = None
    ) -> MountResult:
        """
        Mount one NTFS drive in read/write mode, unmounting it first if needed.

        In unmount-only mode nothing is mounted back.

        Args:
            request: Resolved volume to process
            on_unmount: Called once the existing mount is removed, before remounting

        Returns:
            MountResult describing what was done
        """
        result = MountResult(
            volume_name=request.volume_name,
            device_identifier=request.device_identifier,
            mount_path=request.mount_path,
        )

        current_mount = self.enumerator.get_mount_point(request.device_identifier)
        if current_mount:
            self.unmount_device(request.device_identifier, Path(current_mount))
            result.unmounted = True
            if on_unmount:
                on_unmount(request)
        else:
            logger.debug(f"{request.device_identifier} is not mounted")

        if self.config.unmount_only:
            return result

        self._prepare_mount_point(request.mount_path)
        self._perform_mount(request)
        result.mounted = True

        logger.info(f"Mounted '{request.volume_name}' at {request.mount_path}")
        return result

    def unmount_device(self, device_identifier: str, mount_point: Path) -> None:
        """
        Force unmount a device and drop its stale mount point directory.

        Args:
            device_identifier: Device identifier (e.g., "disk2s1")
            mount_point: Where the device is currently mounted

        Raises:
            MountingError: If unmounting or the cleanup fails
        """
        logger.info(f"Unmounting {device_identifier} from {mount_point}")

        success, stderr = self.system.unmount(device_path(device_identifier))
        if not success:
            logger.debug(f"Unmount failed: {stderr}")
            raise MountingError(f"Unable to unmount {device_path(device_identifier)}")

        self.cleanup_mount_point(mount_point)

    def cleanup_mount_point(self, mount_point: Path) -> None:
        """Remove a mount point directory if it is left behind empty"""
        if not self.system.is_empty_directory(mount_point):
            return

        try:
            self.system.remove_directory(mount_point)
            logger.info(f"Cleaned up mount point {mount_point}")
        except OSError as e:
            raise MountingError(f"Unable to remove mount path {mount_point}: {e}")

    def _check_driver(self) -> None:
        if not self.system.command_available(str(self.config.driver_path)):
            raise MountingError(f"NTFS-3G driver not found at {self.config.driver_path}")

    def _prepare_mount_point(self, mount_path: Path) -> None:
        try:
            self.system.make_directory(mount_path)
        except OSError as e:
            logger.debug(f"Failed to create mount point {mount_path}: {e}")
            raise MountingError(f"Unable to create mount path {mount_path}")

    def _perform_mount(self, request: MountRequest) -> None:
        """Execute the NTFS-3G driver"""
        command = [
            str(self.config.driver_path),
            device_path(request.device_identifier),
            str(request.mount_path),
        ]
        for option in self.MOUNT_OPTIONS + (f"volname={request.volume_name}",):
            command.extend(["-o", option])

        logger.info(f"Mounting {request.device_identifier} to {request.mount_path}")
        success, stderr = self.system.run_driver(command)
        if not success:
            logger.debug(f"NTFS-3G failed: {stderr}")
            raise MountingError(f"Unable to mount NTFS volume {request.mount_path}")
