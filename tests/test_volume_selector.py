"""Tests for volume selection"""

import pytest

from ntfs_remount.core.errors import DiskutilParsingError
from ntfs_remount.discovery.drive_enumerator import NTFSDrive
from ntfs_remount.discovery.volume_selector import select_volume_names

AVAILABLE = [NTFSDrive("DATA", "disk2s1"), NTFSDrive("BACKUP", "disk3s1")]


def test_no_request_selects_every_drive_in_order():
    assert select_volume_names(AVAILABLE, ()) == ("DATA", "BACKUP")


def test_request_is_returned_unchanged():
    requested = ["BACKUP", "MISSING", "DATA"]

    assert select_volume_names(AVAILABLE, requested) == ("BACKUP", "MISSING", "DATA")


def test_request_is_not_checked_against_available_drives():
    assert select_volume_names([], ["DATA"]) == ("DATA",)


def test_drive_without_volume_name_fails_selecting_all():
    with pytest.raises(DiskutilParsingError, match="disk4s1"):
        select_volume_names([NTFSDrive("DATA", "disk2s1"), NTFSDrive("", "disk4s1")], ())


def test_drive_without_volume_name_is_ignored_when_names_are_requested():
    available = [NTFSDrive("DATA", "disk2s1"), NTFSDrive("", "disk4s1")]

    assert select_volume_names(available, ["DATA"]) == ("DATA",)
