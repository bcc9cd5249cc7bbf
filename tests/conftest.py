"""
Shared fixtures: an in-memory stand-in for the macOS system commands.
"""

import logging
import plistlib
from pathlib import Path

import pytest

from ntfs_remount.config.loader import MountConfig
from ntfs_remount.core.system import SystemCommands


def partition(device, volume_name, content="Windows_NTFS", mount_point=None):
    entry = {
        "Content": content,
        "DeviceIdentifier": device,
        "Size": 1000204886016,
        "VolumeName": volume_name,
    }
    if mount_point:
        entry["MountPoint"] = mount_point
    return entry


def diskutil_listing(*disks):
    """Build `diskutil list -plist` output. Each disk is a list of partitions"""
    all_disks = []
    for index, partitions in enumerate(disks):
        all_disks.append({
            "Content": "GUID_partition_scheme",
            "DeviceIdentifier": f"disk{index}",
            "OSInternal": False,
            "Partitions": partitions,
            "Size": 1000204886016,
        })
    return plistlib.dumps({
        "AllDisks": [d["DeviceIdentifier"] for d in all_disks],
        "AllDisksAndPartitions": all_disks,
        "VolumesFromDisks": [],
        "WholeDisks": [d["DeviceIdentifier"] for d in all_disks],
    }).decode("utf-8")


class FakeSystem(SystemCommands):
    """Records every system call and answers from in-memory state"""

    def __init__(self, listing="", mounts=None, privileged=True):
        self.listing = listing
        self.list_succeeds = True
        self.mounts = dict(mounts or {})    # device path -> mount point
        self.privileged = privileged
        self.directories = set()            # existing empty directories
        self.driver_available = True
        self.fail_unmount = set()
        self.fail_driver = set()
        self.calls = []

    def is_privileged(self):
        return self.privileged

    def list_disks(self):
        self.calls.append(("list",))
        return self.list_succeeds, self.listing

    def disk_info(self, device_path):
        self.calls.append(("info", device_path))
        info = {"DeviceNode": device_path}
        if device_path in self.mounts:
            info["MountPoint"] = self.mounts[device_path]
        return True, plistlib.dumps(info).decode("utf-8")

    def unmount(self, device_path):
        self.calls.append(("unmount", device_path))
        if device_path in self.fail_unmount:
            return False, "Unmount of disk failed: at least one volume could not be unmounted"
        self.mounts.pop(device_path, None)
        return True, ""

    def is_empty_directory(self, path):
        return Path(path) in self.directories

    def make_directory(self, path):
        self.calls.append(("mkdir", Path(path)))
        if Path(path) in self.directories:
            raise FileExistsError(f"[Errno 17] File exists: '{path}'")
        self.directories.add(Path(path))

    def remove_directory(self, path):
        self.calls.append(("rmdir", Path(path)))
        self.directories.discard(Path(path))

    def command_available(self, command):
        return self.driver_available

    def run_driver(self, command):
        self.calls.append(("mount", tuple(command)))
        device = command[1]
        if device in self.fail_driver:
            return False, "ntfs-3g: Failed to access volume"
        self.mounts[device] = command[2]
        return True, None

    def calls_of(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def two_drives_listing():
    return diskutil_listing(
        [partition("disk2s1", "DATA", mount_point="/Volumes/DATA")],
        [
            partition("disk3s1", "EFI", content="EFI"),
            partition("disk3s2", "BACKUP", mount_point="/Volumes/BACKUP"),
        ],
    )


@pytest.fixture
def fake_system(two_drives_listing):
    system = FakeSystem(
        listing=two_drives_listing,
        mounts={"/dev/disk2s1": "/Volumes/DATA", "/dev/disk3s2": "/Volumes/BACKUP"},
    )
    system.directories.update({Path("/Volumes/DATA"), Path("/Volumes/BACKUP")})
    return system


@pytest.fixture
def mount_config():
    return MountConfig(
        volumes_folder=Path("/Volumes"),
        unmount_only=False,
        requested_volumes=(),
        driver_path=Path("/usr/local/bin/ntfs-3g"),
        log_level="WARNING",
    )


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("ntfs_remount")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
