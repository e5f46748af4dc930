"""Custom exceptions for the GitHub integration."""


class GistClientError(Exception):
    """Raised when a GitHub Gist API call fails."""

    pass
