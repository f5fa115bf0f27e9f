"""Custom exceptions for the tar reader."""


class ArchiveError(Exception):
    """Base exception for all archive-related errors."""

    def __init__(self, message: str = "unknown error", can_retry: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.can_retry = can_retry

    def __str__(self) -> str:
        return f"Tar failed: {self.message}, retriable: {self.can_retry}"


class FileError(ArchiveError):
    """Raised when reading the archive or writing its content fails."""

    pass


class HeaderError(ArchiveError):
    """Raised when a header record or PAX payload is malformed."""

    def __init__(self, message: str = "wrong header format") -> None:
        super().__init__(message, can_retry=False)
