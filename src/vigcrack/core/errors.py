from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    FILE_NOT_FOUND = "file-not-found"
    WRITE_FAILED = "write-failed"
    DECODE_FAILED = "decode-failed"


class CipherToolError(Exception):
    """Base error for everything the core raises. The CLI decides how to report it."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class InvalidArgumentError(CipherToolError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class FileAccessError(CipherToolError, OSError):
    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, message: str, *, path: str = "", kind: ErrorKind | None = None) -> None:
        super().__init__(message, kind=kind)
        self.path = path
