"""Classification of block I/O target paths."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

_PHYSICAL_DRIVE_PREFIX = "\\\\.\\PhysicalDrive"
_VOLUME_PREFIX = "\\\\.\\Volume{"


class TargetKind(enum.Enum):
    """What kind of object a target path names."""

    REGULAR_FILE = "regular_file"
    RAW_DEVICE = "raw_device"
    DIRECTORY = "directory"
    MISSING = "missing"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class InspectionTargetInfo:
    """What is known about a target path before opening it."""

    path: Path
    kind: TargetKind = TargetKind.UNKNOWN
    exists: bool = False
    probe_candidate: bool = False
    is_regular_file: bool = False
    is_directory: bool = False
    size_bytes: Optional[int] = None


def looks_like_raw_device_path(native_path: str) -> bool:
    """Return True if the path names a raw drive or volume device."""
    return native_path.startswith(_PHYSICAL_DRIVE_PREFIX) or native_path.startswith(
        _VOLUME_PREFIX
    )


def inspect_target_path(path: Union[str, os.PathLike]) -> InspectionTargetInfo:
    """Classify a path as a raw device, regular file, directory, missing or unknown."""
    native_path = os.fspath(path)
    info = InspectionTargetInfo(path=Path(native_path))

    if looks_like_raw_device_path(native_path):
        info.kind = TargetKind.RAW_DEVICE
        info.probe_candidate = True
        return info

    try:
        status = os.stat(native_path)
    except (OSError, ValueError):
        info.kind = TargetKind.MISSING
        return info

    info.exists = True
    if stat.S_ISREG(status.st_mode):
        info.is_regular_file = True
        info.kind = TargetKind.REGULAR_FILE
        info.probe_candidate = True
        info.size_bytes = status.st_size
        return info

    if stat.S_ISDIR(status.st_mode):
        info.is_directory = True
        info.kind = TargetKind.DIRECTORY
        return info

    info.kind = TargetKind.UNKNOWN
    return info