"""Custom exceptions for the Notion integration."""


class NotionClientError(Exception):
    """Raised when a Notion API call fails."""

    pass
