"""Custom exceptions for mandate extractor."""

from enum import Enum
from typing import Optional


class MandateExtractorError(Exception):
    """Base exception for mandate extractor errors."""

    pass


class ErrorKind(str, Enum):
    """Failure classes a single extraction can end in."""

    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"
    EMPTY = "empty"
    WRITE_ERROR = "write_error"


class ExtractionError(MandateExtractorError):
    """Raised when last-page extraction fails for one file.

    A single error type discriminated by ``kind`` so callers can branch on
    the failure class without inspecting the exception type.

    Attributes:
        kind: Failure class
        file_path: Offending path (the output path for WRITE_ERROR)
        message: Human-readable description
        cause: Underlying exception from the filesystem or PDF library, if any
    """

    def __init__(
        self,
        kind: ErrorKind,
        file_path: str,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.file_path = file_path
        self.message = message
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"ExtractionError(kind={self.kind.value!r}, "
            f"file_path={self.file_path!r}, message={self.message!r})"
        )

    @classmethod
    def not_found(
        cls,
        file_path: str,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> "ExtractionError":
        return cls(
            ErrorKind.NOT_FOUND,
            file_path,
            message or f"PDF file not found: {file_path}",
            cause,
        )

    @classmethod
    def corrupt(
        cls, file_path: str, cause: Optional[BaseException] = None
    ) -> "ExtractionError":
        return cls(
            ErrorKind.CORRUPT,
            file_path,
            f"PDF file is corrupt or invalid: {file_path}",
            cause,
        )

    @classmethod
    def empty(cls, file_path: str) -> "ExtractionError":
        return cls(ErrorKind.EMPTY, file_path, f"PDF has no pages: {file_path}")

    @classmethod
    def write_error(
        cls, file_path: str, cause: Optional[BaseException] = None
    ) -> "ExtractionError":
        return cls(
            ErrorKind.WRITE_ERROR,
            file_path,
            f"Failed to write PDF: {file_path}",
            cause,
        )
