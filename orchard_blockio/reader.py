"""Random-access readers over image files, raw devices and memory."""

from __future__ import annotations

import abc
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from orchard_blockio.errors import BlockIOError, ErrorCode
from orchard_blockio.inspection import InspectionTargetInfo, TargetKind, inspect_target_path

_MAX_READ_SIZE = 0xFFFFFFFF


class Reader(abc.ABC):
    """A positional, read-only byte source."""

    @abc.abstractmethod
    def size_bytes(self) -> int:
        """Return the total size in bytes, or raise if it is not known."""

    @abc.abstractmethod
    def read_at(self, offset: int, size: int) -> bytes:
        """Read up to ``size`` bytes at ``offset``; fewer may be returned."""

    @abc.abstractmethod
    def backend_name(self) -> str:
        """Return a short name for the kind of backend."""

    @abc.abstractmethod
    def target_kind(self) -> TargetKind:
        """Return the kind of target this reader reads."""

    @abc.abstractmethod
    def path(self) -> Path:
        """Return the path or label of the target."""

    def close(self) -> None:
        """Release any resources held by the reader."""

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise BlockIOError(ErrorCode.INVALID_ARGUMENT, "Read offset must not be negative.")


def _system_code(error: OSError) -> int:
    code = getattr(error, "winerror", None) or error.errno
    return code or 0


def _open_error_code(error: OSError) -> ErrorCode:
    if isinstance(error, FileNotFoundError):
        return ErrorCode.NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorCode.ACCESS_DENIED
    return ErrorCode.OPEN_FAILED


class FileReader(Reader):
    """Reader over an operating-system file handle."""

    def __init__(
        self,
        path: Union[str, os.PathLike],
        target_kind: TargetKind = TargetKind.REGULAR_FILE,
    ) -> None:
        self._path = Path(os.fspath(path))
        self._target_kind = target_kind
        self._lock = threading.Lock()
        self._known_size: Optional[int] = None
        self._size_error: Optional[BlockIOError] = None

        flags = os.O_RDONLY | getattr(os, "O_BINARY", 0)
        try:
            self._fd: Optional[int] = os.open(self._path, flags)
        except OSError as error:
            raise BlockIOError(
                _open_error_code(error), "Failed to open block I/O target.", _system_code(error)
            ) from error

        try:
            self._known_size = self._query_size()
        except BlockIOError as error:
            if target_kind is TargetKind.REGULAR_FILE:
                self.close()
                raise
            self._size_error = error

    def _query_size(self) -> int:
        assert self._fd is not None
        if self._target_kind is TargetKind.RAW_DEVICE:
            try:
                return os.lseek(self._fd, 0, os.SEEK_END)
            except OSError as error:
                raise BlockIOError(
                    ErrorCode.IOCTL_FAILED,
                    "Failed to query raw-device size.",
                    _system_code(error),
                ) from error
        try:
            return os.fstat(self._fd).st_size
        except OSError as error:
            raise BlockIOError(
                ErrorCode.OPEN_FAILED, "Failed to query file size.", _system_code(error)
            ) from error

    def size_bytes(self) -> int:
        if self._known_size is not None:
            return self._known_size
        if self._size_error is not None:
            raise self._size_error
        raise BlockIOError(
            ErrorCode.NOT_IMPLEMENTED, "Reader size is not available for this target."
        )

    def read_at(self, offset: int, size: int) -> bytes:
        _check_offset(offset)
        if size <= 0:
            return b""
        if size > _MAX_READ_SIZE:
            raise BlockIOError(
                ErrorCode.INVALID_ARGUMENT, "read_at only supports buffers up to 32-bit size."
            )
        fd = self._fd
        if fd is None:
            raise BlockIOError(ErrorCode.READ_FAILED, "ReadAt failed: reader is closed.")
        try:
            if hasattr(os, "pread"):
                return os.pread(fd, size, offset)
            with self._lock:
                os.lseek(fd, offset, os.SEEK_SET)
                return os.read(fd, size)
        except OSError as error:
            raise BlockIOError(
                ErrorCode.READ_FAILED, "ReadAt failed.", _system_code(error)
            ) from error

    def backend_name(self) -> str:
        return "file_handle"

    def target_kind(self) -> TargetKind:
        return self._target_kind

    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        fd, self._fd = self._fd, None
        if fd is not None:
            os.close(fd)


class MemoryReader(Reader):
    """Reader over an in-memory byte string."""

    def __init__(self, data: bytes, label: Union[str, os.PathLike] = "") -> None:
        self._data = bytes(data)
        self._label = Path(os.fspath(label))

    def size_bytes(self) -> int:
        return len(self._data)

    def read_at(self, offset: int, size: int) -> bytes:
        _check_offset(offset)
        if size <= 0 or offset > len(self._data):
            return b""
        return self._data[offset : offset + size]

    def backend_name(self) -> str:
        return "memory"

    def target_kind(self) -> TargetKind:
        return TargetKind.REGULAR_FILE

    def path(self) -> Path:
        return self._label


@dataclass(frozen=True)
class ReadRequest:
    """A byte range to read."""

    offset: int = 0
    size: int = 0


def open_reader(target: Union[str, os.PathLike, InspectionTargetInfo]) -> FileReader:
    """Open a reader for a path or an already inspected target."""
    info = target if isinstance(target, InspectionTargetInfo) else inspect_target_path(target)

    if info.kind is TargetKind.MISSING:
        raise BlockIOError(
            ErrorCode.NOT_FOUND,
            "Target path does not exist or is not a supported raw-device path.",
        )
    if info.kind is TargetKind.DIRECTORY:
        raise BlockIOError(
            ErrorCode.UNSUPPORTED_TARGET, "Directories are not valid block I/O targets."
        )
    if info.kind is TargetKind.UNKNOWN:
        raise BlockIOError(
            ErrorCode.UNSUPPORTED_TARGET,
            "Target kind is not supported by the block I/O layer.",
        )
    return FileReader(info.path, info.kind)


def read_exact(reader: Reader, request: ReadRequest) -> bytes:
    """Read exactly ``request.size`` bytes, raising SHORT_READ if the source ends early."""
    chunks = []
    total = 0
    while total < request.size:
        chunk = reader.read_at(request.offset + total, request.size - total)
        if not chunk:
            raise BlockIOError(
                ErrorCode.SHORT_READ, "ReadAt returned fewer bytes than requested."
            )
        chunks.append(chunk)
        total += len(chunk)
    return b"".join(chunks)


def make_memory_reader(data: bytes, label: Union[str, os.PathLike] = "") -> MemoryReader:
    """Create a reader over a copy of ``data``."""
    return MemoryReader(data, label)