"""Error codes and the exception raised by the block I/O layer."""

from __future__ import annotations

import enum


class ErrorCode(enum.Enum):
    """Category of a block I/O failure."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    UNSUPPORTED_TARGET = "unsupported_target"
    ACCESS_DENIED = "access_denied"
    OPEN_FAILED = "open_failed"
    READ_FAILED = "read_failed"
    SHORT_READ = "short_read"
    OUT_OF_RANGE = "out_of_range"
    IOCTL_FAILED = "ioctl_failed"
    INVALID_FORMAT = "invalid_format"
    CORRUPT_DATA = "corrupt_data"
    NOT_IMPLEMENTED = "not_implemented"

    def __str__(self) -> str:
        return self.value


class BlockIOError(Exception):
    """Raised when a block I/O operation fails."""

    def __init__(self, code: ErrorCode, message: str = "", system_code: int = 0) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.system_code = system_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!s}, message={self.message!r}, "
            f"system_code={self.system_code})"
        )