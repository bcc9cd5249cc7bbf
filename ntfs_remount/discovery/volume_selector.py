#!/usr/bin/env python3
"""
Volume selection: which NTFS volumes a run operates on.
"""

from typing import Sequence, Tuple

from ntfs_remount.core.errors import DiskutilParsingError
from .drive_enumerator import NTFSDrive

def select_volume_names(
    available: Sequence[NTFSDrive],
    requested: Sequence[str]
) -> Tuple[str, ...]:
    """
    Select volume names to be mounted in read/write mode.

    Without any requested name every available drive is selected, in
    enumeration order. Requested names are returned as given: whether they
    exist is only checked when each volume gets processed.

    Args:
        available: Currently connected NTFS drives
        requested: Volume names given by the user

    Returns:
        Tuple of volume names

    Raises:
        DiskutilParsingError: If all drives are selected and one has no volume name
    """
    if requested:
        return tuple(requested)

    names = []
    for drive in available:
        if not drive.volume_name:
            raise DiskutilParsingError(f"Unable to get NTFS volume name of {drive.device_identifier}")
        names.append(drive.volume_name)
    return tuple(names)
