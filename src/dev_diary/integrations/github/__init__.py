"""GitHub Gist integration."""

from .exceptions import GistClientError
from .gist_client import GistClient
from .models import GistContent, GistSummary

__all__ = ["GistClient", "GistClientError", "GistContent", "GistSummary"]
