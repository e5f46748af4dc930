"""Custom exceptions for the generative backend."""


class GenerativeBackendError(Exception):
    """Raised when the generative backend cannot produce a completion."""

    pass
