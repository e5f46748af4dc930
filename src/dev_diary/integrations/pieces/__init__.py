"""Pieces OS snippet store integration."""

from .exceptions import PiecesClientError
from .models import PiecesAsset, SnippetAnalysis
from .pieces_client import PiecesClient

__all__ = ["PiecesAsset", "PiecesClient", "PiecesClientError", "SnippetAnalysis"]
