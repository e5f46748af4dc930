"""Bounded list of recently captured snippets."""

from dev_diary.models.snippet import Snippet

DEFAULT_CAPACITY = 10


class RecentSnippets:
    """Keeps the most recent snippets, newest first, de-duplicated by id.

    Instances are watcher listeners: register one with
    ``watcher.add_listener(recent)``.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._snippets: list[Snippet] = []

    def __call__(self, snippet: Snippet) -> None:
        self.add(snippet)

    def add(self, snippet: Snippet) -> None:
        others = [s for s in self._snippets if s.id != snippet.id]
        self._snippets = [snippet, *others][: self.capacity]

    def items(self) -> list[Snippet]:
        return list(self._snippets)

    def clear(self) -> None:
        self._snippets = []

    def __len__(self) -> int:
        return len(self._snippets)
