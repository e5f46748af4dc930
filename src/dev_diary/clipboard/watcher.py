"""
Clipboard watcher that turns copied code into snippet events.

The watcher is either Idle or Active. While Active, paste events and
focus regains feed one content processor that filters code-like text,
classifies it and notifies listeners in registration order.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from dev_diary.detection import detect_language
from dev_diary.models.snippet import Snippet

from .exceptions import ClipboardUnavailableError
from .host import ClipboardHost

logger = logging.getLogger(__name__)

SnippetListener = Callable[[Snippet], None]

EXTERNAL_PROJECT = "External Source"
EXTERNAL_SOURCE = "External Clipboard"
EXTERNAL_TAG = "external"

MIN_CODE_LENGTH = 10
MAX_CODE_LENGTH = 10000
MIN_INDICATORS = 2

CODE_TOKENS: tuple[str, ...] = (
    # Syntax
    "{",
    "}",
    "()",
    "[]",
    "=>",
    "->",
    ";",
    # Keywords
    "function",
    "return",
    "const",
    "let",
    "var",
    "class",
    "import",
    "export",
    "def",
    "if",
    "else",
    "for",
    "while",
    "try",
    "catch",
)

INDENTED_LINE_PATTERN = re.compile(r"\n\s+\w")


def looks_like_code(text: str) -> bool:
    """Heuristic check that ``text`` is source code rather than prose."""
    if len(text) < MIN_CODE_LENGTH or len(text) > MAX_CODE_LENGTH:
        return False

    indicators = sum(1 for token in CODE_TOKENS if token in text)
    if INDENTED_LINE_PATTERN.search(text):
        indicators += 1
    if len(text.split("\n")) > 2:
        indicators += 1
    return indicators >= MIN_INDICATORS


class ClipboardWatcher:
    """Observes a clipboard host and emits snippets for copied code."""

    def __init__(
        self,
        host: ClipboardHost | None = None,
        detector: Callable[[str], str] = detect_language,
        on_snippet: SnippetListener | None = None,
    ) -> None:
        self.host = host
        self._detector = detector
        self._listeners: list[SnippetListener] = []
        self._active = False
        self._last_text = ""
        if on_snippet is not None:
            self.add_listener(on_snippet)

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Begin observing the host. No-op if active or the host has no clipboard."""
        if self._active or self.host is None or not self.host.is_available():
            return
        self.host.attach(self)
        self._active = True
        logger.info("Clipboard monitoring started")

    def stop(self) -> None:
        """Stop observing the host. No-op if idle."""
        if not self._active or self.host is None:
            return
        self.host.detach(self)
        self._active = False
        logger.info("Clipboard monitoring stopped")

    def add_listener(self, listener: SnippetListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SnippetListener) -> None:
        self._listeners = [
            registered for registered in self._listeners if registered != listener
        ]

    def handle_paste(self, text: str | None) -> Snippet | None:
        """Process text received from a paste event."""
        if not self._active or not text:
            return None
        return self.process_content(text)

    async def handle_focus(self) -> Snippet | None:
        """Read the clipboard after the host regains focus."""
        if not self._active or self.host is None:
            return None
        try:
            text = await self.host.read_text()
        except (ClipboardUnavailableError, PermissionError) as e:
            logger.info(f"Could not access clipboard: {e}")
            return None
        if not text:
            return None
        return self.process_content(text)

    def process_content(self, text: str) -> Snippet | None:
        """Turn code-like text into a snippet and notify listeners."""
        if text == self._last_text or not looks_like_code(text):
            return None
        self._last_text = text

        language = self._detector(text)
        snippet = Snippet(
            id=f"external-{uuid.uuid4().hex}",
            code=text,
            language=language,
            project=EXTERNAL_PROJECT,
            tags=[language.lower(), EXTERNAL_TAG],
            timestamp=datetime.now(UTC),
            source=EXTERNAL_SOURCE,
            enriched=False,
        )
        logger.debug(f"Captured {language} snippet {snippet.id}")

        for listener in list(self._listeners):
            listener(snippet)
        return snippet


class _WatcherRegistry:
    """Process-wide holder of shared clipboard watchers, keyed by name."""

    _instances: dict[str, ClipboardWatcher] = {}

    @classmethod
    def get_instance(
        cls, key: str, host: ClipboardHost | None = None
    ) -> ClipboardWatcher:
        """Get the watcher for ``key``, creating it on first use."""
        if key not in cls._instances:
            cls._instances[key] = ClipboardWatcher(host=host)
        return cls._instances[key]

    @classmethod
    def reset(cls) -> None:
        for watcher in cls._instances.values():
            watcher.stop()
        cls._instances.clear()


def get_clipboard_watcher(
    key: str = "default", host: ClipboardHost | None = None
) -> ClipboardWatcher:
    """Return the shared watcher for ``key``.

    ``host`` is only used when the watcher is created; later calls return
    the same instance so event handlers are attached at most once.
    """
    return _WatcherRegistry.get_instance(key, host)


def reset_clipboard_watchers() -> None:
    """Stop and forget every shared watcher."""
    _WatcherRegistry.reset()
