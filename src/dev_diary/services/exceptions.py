"""
Custom exceptions for the diary services.

Only first-pass generation failures escape the services; collection and
publishing failures degrade to partial results.
"""


class DiaryError(Exception):
    """Base exception for all diary service errors."""

    pass


class DiaryGenerationError(DiaryError):
    """Raised when the first generation pass produces no diary."""

    pass


class PublishError(DiaryError):
    """Raised by a destination that could not publish the diary."""

    pass


class InvalidDiaryError(DiaryError):
    """Raised when publishing is asked to handle something that is not a diary."""

    pass
