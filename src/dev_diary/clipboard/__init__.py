"""Clipboard monitoring for externally copied code."""

from .exceptions import ClipboardError, ClipboardUnavailableError
from .host import ClipboardHost, InProcessClipboardHost, UnavailableClipboardHost
from .recent import RecentSnippets
from .watcher import (
    ClipboardWatcher,
    SnippetListener,
    get_clipboard_watcher,
    looks_like_code,
    reset_clipboard_watchers,
)

__all__ = [
    "ClipboardError",
    "ClipboardHost",
    "ClipboardUnavailableError",
    "ClipboardWatcher",
    "InProcessClipboardHost",
    "RecentSnippets",
    "SnippetListener",
    "UnavailableClipboardHost",
    "get_clipboard_watcher",
    "looks_like_code",
    "reset_clipboard_watchers",
]
