"""Custom exceptions for clipboard monitoring."""


class ClipboardError(Exception):
    """Base exception for clipboard errors."""

    pass


class ClipboardUnavailableError(ClipboardError):
    """Raised when the clipboard cannot be read (permission or no API)."""

    pass
