"""Exception classes for xxcheck operations."""


class XxcheckError(Exception):
    """Base exception for xxcheck operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the manifest or file that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ChecksumFormatError(XxcheckError):
    """Raised when a checksum line or digest field is malformed."""

    error_prefix = "Improperly formatted checksum line"


class ManifestReadError(XxcheckError):
    """Raised when a manifest can no longer be read line by line."""

    error_prefix = "Manifest read failed"

    #: Short diagnostic shown after the line number.
    reason: str = "unknown error"


class LineTooLongError(ManifestReadError):
    """Raised when a record exceeds the maximum line length."""

    reason = "too long line"


class OutOfMemoryError(ManifestReadError):
    """Raised when the line buffer cannot be grown."""

    reason = "out of memory"


class TooManyLinesError(ManifestReadError):
    """Raised when the line counter passes its ceiling."""

    reason = "too many checksum lines"
