"""Snippet store client for the local Pieces OS HTTP API.

Every public method degrades to an empty result instead of raising so
snippet retrieval can never break a diary cycle.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx

from dev_diary.models.snippet import SnippetRecord

from .exceptions import PiecesClientError
from .models import PiecesAsset, SnippetAnalysis

logger = logging.getLogger(__name__)


class PiecesClient:
    """Minimal client for the Pieces OS assets API."""

    DEFAULT_BASE_URL = "http://localhost:1000"

    def __init__(self, base_url: str | None = None, api_key: str | None = None) -> None:
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.headers = {"Content-Type": "application/json"}
        if api_key:
            self.headers["Authorization"] = f"Bearer {api_key}"

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.request(
                    method, f"{self.base_url}{path}", json=payload, headers=self.headers
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise PiecesClientError(f"Pieces {method} {path} failed: {e}") from e
        if not isinstance(data, dict):
            raise PiecesClientError(f"Unexpected Pieces response for {path}")
        return data

    async def save_snippet(
        self,
        code: str,
        language: str,
        title: str,
        tags: list[str] | None = None,
        project: str | None = None,
    ) -> str:
        """Save a snippet and return its asset id, or ``""`` on failure."""
        payload: dict[str, Any] = {
            "asset": {
                "name": title,
                "format": {"syntax_highlight": language.lower()},
                "original": code,
                "tags": [{"text": tag} for tag in tags or []],
                "metadata": {
                    "custom": [{"key": "project", "value": project}] if project else []
                },
            }
        }
        try:
            data = await self._request("POST", "/assets/create", payload)
        except PiecesClientError as e:
            logger.error(f"Error saving snippet to Pieces: {e}")
            return ""
        return (data.get("asset") or {}).get("id") or ""

    async def get_all_snippets(self) -> list[PiecesAsset]:
        """Return every stored asset."""
        try:
            data = await self._request("GET", "/assets/snapshot")
            items = data.get("iterable") or []
            if not isinstance(items, list):
                raise PiecesClientError("Unexpected Pieces asset listing")
            return [PiecesAsset.model_validate(item) for item in items]
        except (PiecesClientError, ValueError) as e:
            logger.error(f"Error retrieving snippets from Pieces: {e}")
            return []

    async def get_today_assets(self) -> list[PiecesAsset]:
        """Return assets created or updated since local midnight."""
        midnight = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        cutoff = int(midnight.timestamp() * 1000)
        assets = await self.get_all_snippets()
        return [a for a in assets if a.created_ms >= cutoff or a.updated_ms >= cutoff]

    async def get_today_snippets(self) -> list[SnippetRecord]:
        """Return today's snippets as activity records."""
        try:
            assets = await self.get_today_assets()
            return [asset.to_record() for asset in assets]
        except ValueError as e:
            logger.error(f"Error converting today's snippets from Pieces: {e}")
            return []

    def analyze_snippets(self, assets: list[PiecesAsset]) -> SnippetAnalysis:
        """Count languages and projects and rank the most used tags."""
        return SnippetAnalysis.from_assets(assets)
