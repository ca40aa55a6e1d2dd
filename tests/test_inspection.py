from pathlib import Path

import pytest

from orchard_blockio.inspection import (
    InspectionTargetInfo,
    TargetKind,
    inspect_target_path,
    looks_like_raw_device_path,
)


@pytest.mark.parametrize(
    ("kind", "text"),
    [
        (TargetKind.REGULAR_FILE, "regular_file"),
        (TargetKind.RAW_DEVICE, "raw_device"),
        (TargetKind.DIRECTORY, "directory"),
        (TargetKind.MISSING, "missing"),
        (TargetKind.UNKNOWN, "unknown"),
    ],
)
def test_target_kind_string(kind, text):
    assert str(kind) == text


@pytest.mark.parametrize(
    "path",
    ["\\\\.\\PhysicalDrive0", "\\\\.\\PhysicalDrive12", "\\\\.\\Volume{abcd-ef}"],
)
def test_raw_device_paths_are_recognised(path):
    assert looks_like_raw_device_path(path) is True


@pytest.mark.parametrize(
    "path", ["C:\\image.img", "/dev/disk0", "\\\\.\\C:", "PhysicalDrive0", ""]
)
def test_other_paths_are_not_raw_devices(path):
    assert looks_like_raw_device_path(path) is False


def test_raw_device_path_is_probe_candidate_without_stat():
    info = inspect_target_path("\\\\.\\PhysicalDrive3")
    assert info.kind is TargetKind.RAW_DEVICE
    assert info.probe_candidate is True
    assert info.exists is False
    assert info.size_bytes is None


def test_regular_file(tmp_path):
    target = tmp_path / "image.img"
    target.write_bytes(b"NXSB" * 8)
    info = inspect_target_path(target)
    assert info.kind is TargetKind.REGULAR_FILE
    assert info.exists is True
    assert info.is_regular_file is True
    assert info.is_directory is False
    assert info.probe_candidate is True
    assert info.size_bytes == len(b"NXSB" * 8)
    assert info.path == target


def test_directory(tmp_path):
    info = inspect_target_path(tmp_path)
    assert info.kind is TargetKind.DIRECTORY
    assert info.exists is True
    assert info.is_directory is True
    assert info.probe_candidate is False
    assert info.size_bytes is None


def test_missing(tmp_path):
    info = inspect_target_path(tmp_path / "absent.img")
    assert info.kind is TargetKind.MISSING
    assert info.exists is False
    assert info.probe_candidate is False


def test_accepts_string_path(tmp_path):
    target = tmp_path / "s.img"
    target.write_bytes(b"")
    info = inspect_target_path(str(target))
    assert info.kind is TargetKind.REGULAR_FILE
    assert info.size_bytes == 0
    assert isinstance(info.path, Path) and info.path == target


def test_info_defaults():
    info = InspectionTargetInfo(path=Path("x"))
    assert info.kind is TargetKind.UNKNOWN
    assert (info.exists, info.probe_candidate, info.size_bytes) == (False, False, None)