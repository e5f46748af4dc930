"""
Clipboard hosts deliver paste and focus events to clipboard watchers.

A host stands for whatever environment owns the clipboard: a browser tab
talking to the web API, a desktop shell, or a test double.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from .exceptions import ClipboardUnavailableError

if TYPE_CHECKING:
    from .watcher import ClipboardWatcher

logger = logging.getLogger(__name__)

ClipboardReader = Callable[[], Awaitable[str]]


class ClipboardHost(ABC):
    """Abstract interface for an environment that exposes a clipboard."""

    def is_available(self) -> bool:
        """Return ``True`` if the host can deliver clipboard events."""
        return True

    @abstractmethod
    def attach(self, watcher: ClipboardWatcher) -> None:
        """Start delivering paste and focus events to ``watcher``."""
        pass

    @abstractmethod
    def detach(self, watcher: ClipboardWatcher) -> None:
        """Stop delivering events to ``watcher``."""
        pass

    @abstractmethod
    async def read_text(self) -> str:
        """Read the current clipboard text.

        Raises:
            ClipboardUnavailableError: If access is refused or unsupported.
        """
        pass


class InProcessClipboardHost(ClipboardHost):
    """Host whose events are pushed by the application itself.

    The web API forwards pastes from the dashboard through :meth:`paste`
    and window focus changes through :meth:`focus`.
    """

    def __init__(self, reader: ClipboardReader | None = None) -> None:
        self._reader = reader
        self._watchers: list[ClipboardWatcher] = []

    def attach(self, watcher: ClipboardWatcher) -> None:
        if watcher not in self._watchers:
            self._watchers.append(watcher)

    def detach(self, watcher: ClipboardWatcher) -> None:
        self._watchers = [w for w in self._watchers if w is not watcher]

    @property
    def attached(self) -> int:
        return len(self._watchers)

    async def read_text(self) -> str:
        if self._reader is None:
            raise ClipboardUnavailableError("Clipboard reading is not supported")
        return await self._reader()

    def paste(self, text: str) -> None:
        """Dispatch a paste event to every attached watcher."""
        for watcher in list(self._watchers):
            watcher.handle_paste(text)

    async def focus(self) -> None:
        """Dispatch a focus regain event to every attached watcher."""
        for watcher in list(self._watchers):
            await watcher.handle_focus()


class UnavailableClipboardHost(ClipboardHost):
    """Host for environments without any clipboard, such as workers."""

    def is_available(self) -> bool:
        return False

    def attach(self, watcher: ClipboardWatcher) -> None:
        logger.debug("No clipboard available; ignoring attach")

    def detach(self, watcher: ClipboardWatcher) -> None:
        pass

    async def read_text(self) -> str:
        raise ClipboardUnavailableError("No clipboard in this environment")
