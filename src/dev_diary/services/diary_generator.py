"""
Diary generation from collected activity.

Two backend passes: a first pass that writes the diary from the activity
payload, and an enhance pass that polishes it. Only a first-pass failure
is fatal; a failed enhance pass falls back to the first-pass text.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from dev_diary.integrations.llm import GenerativeBackend
from dev_diary.integrations.markdown import MarkdownRenderer
from dev_diary.models.activity import ActivityData
from dev_diary.models.diary import Diary

from .exceptions import DiaryGenerationError
from .prompts import (
    DIARY_SYSTEM_PROMPT,
    ENHANCE_SYSTEM_PROMPT,
    diary_user_prompt,
    enhance_user_prompt,
)

logger = logging.getLogger(__name__)

MAX_SNIPPETS = 5
MAX_SNIPPET_CHARS = 1000
MAX_NOTES = 10
MAX_COMMITS = 10
ELLIPSIS = "..."

TITLE_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def fallback_title(today: date | None = None) -> str:
    return f"Dev Diary - {(today or date.today()).isoformat()}"


def extract_title(markdown: str, today: date | None = None) -> str:
    """Text of the first level-1 heading, or the dated fallback title."""
    match = TITLE_PATTERN.search(markdown)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return fallback_title(today)


def truncate_activity(activity: ActivityData) -> ActivityData:
    """Shrink an activity payload to fit a model's input budget."""
    truncated = activity.model_copy(deep=True)
    truncated.snippets = [
        snippet.model_copy(
            update={
                "code": snippet.code[:MAX_SNIPPET_CHARS] + ELLIPSIS
                if len(snippet.code) > MAX_SNIPPET_CHARS
                else snippet.code
            }
        )
        for snippet in truncated.snippets[:MAX_SNIPPETS]
    ]
    truncated.notes = truncated.notes[:MAX_NOTES]
    truncated.git_activity.commits = truncated.git_activity.commits[:MAX_COMMITS]
    return truncated


class DiaryGenerator:
    """Turns ActivityData into a rendered Diary using a generative backend."""

    def __init__(
        self,
        backend: GenerativeBackend | None,
        renderer: MarkdownRenderer | None = None,
        *,
        max_input_tokens: int | None = None,
        budget_ratio: float = 0.7,
        temperature: float = 0.7,
        max_output_tokens: int = 4000,
    ) -> None:
        self.backend = backend
        self.renderer = renderer or MarkdownRenderer()
        self.max_input_tokens = max_input_tokens
        self.budget_ratio = budget_ratio
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    def build_payload(self, activity: ActivityData) -> str:
        """Serialize activity for the backend, truncating it if it is too large."""
        payload = activity.model_dump_json()
        if self.max_input_tokens is None:
            return payload

        budget = int(self.max_input_tokens * self.budget_ratio)
        token_count = self.backend.count_tokens(payload)
        if token_count > budget:
            logger.warning(
                f"Activity data too large ({token_count} tokens > {budget}), truncating"
            )
            payload = truncate_activity(activity).model_dump_json()
        return payload

    def build_diary(self, markdown: str) -> Diary:
        """Render markdown and extract its title."""
        return Diary(
            title=extract_title(markdown),
            markdown=markdown,
            html=self.renderer.render(markdown),
        )

    async def generate(self, activity: ActivityData) -> Diary:
        """
        Generate a diary for ``activity``.

        Raises:
            DiaryGenerationError: If no backend is configured or the first
                generation pass fails.
        """
        if self.backend is None:
            raise DiaryGenerationError("No generative backend configured")

        payload = self.build_payload(activity)

        try:
            draft = await self.backend.complete(
                DIARY_SYSTEM_PROMPT,
                diary_user_prompt(payload, date.today()),
                self.temperature,
                self.max_output_tokens,
            )
        except Exception as e:
            logger.error(f"Error generating diary content: {e}")
            raise DiaryGenerationError(f"Failed to generate diary content: {e}") from e

        if not draft or not draft.strip():
            raise DiaryGenerationError("Generative backend returned an empty diary")

        markdown = await self._enhance(draft)
        return self.build_diary(markdown)

    async def _enhance(self, draft: str) -> str:
        try:
            enhanced = await self.backend.complete(
                ENHANCE_SYSTEM_PROMPT,
                enhance_user_prompt(draft),
                self.temperature,
                self.max_output_tokens,
            )
        except Exception as e:
            logger.warning(f"Error enhancing diary content, keeping draft: {e}")
            return draft

        if not enhanced or not enhanced.strip():
            logger.warning("Enhance pass returned nothing, keeping draft")
            return draft
        return enhanced
