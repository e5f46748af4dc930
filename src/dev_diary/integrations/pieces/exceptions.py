"""Exceptions raised inside the Pieces client."""


class PiecesClientError(Exception):
    """Raised when the Pieces OS API cannot be reached or answers badly."""

    pass
