"""GitHub Gist client for storing diaries."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx

from .exceptions import GistClientError
from .models import GistContent, GistSummary

logger = logging.getLogger(__name__)


class GistClient:
    """Minimal client for the GitHub Gists REST API."""

    BASE_URL = "https://api.github.com"
    DEFAULT_FILENAME = "dev-diary.md"

    def __init__(self, token: str, filename: str | None = None) -> None:
        if not token:
            raise ValueError("GitHub token cannot be empty")
        self.default_filename = filename or self.DEFAULT_FILENAME
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.request(
                    method,
                    f"{self.BASE_URL}{path}",
                    json=payload,
                    params=params,
                    headers=self.headers,
                )
                resp.raise_for_status()
                return resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GistClientError(f"GitHub {method} {path} failed: {e}") from e

    def dated_filename(self, day: date | None = None) -> str:
        day = day or date.today()
        return f"{day.isoformat()}-{self.default_filename}"

    async def create_document(
        self, title: str, body: str, is_public: bool = False
    ) -> GistSummary:
        """Create a gist holding ``body`` and return its URL and id."""
        data = await self._request(
            "POST",
            "/gists",
            {
                "description": title,
                "public": is_public,
                "files": {self.dated_filename(): {"content": body}},
            },
        )
        try:
            gist = GistSummary.from_api(data)
        except (KeyError, TypeError) as e:
            raise GistClientError(f"Unexpected gist response: {e}") from e
        logger.info(f"Created gist {gist.id}")
        return gist

    async def update_gist(
        self, gist_id: str, content: str, filename: str | None = None
    ) -> str:
        """Replace a file of an existing gist and return the gist URL."""
        data = await self._request(
            "PATCH",
            f"/gists/{gist_id}",
            {"files": {filename or self.default_filename: {"content": content}}},
        )
        return data["html_url"]

    async def list_recent_gists(self, limit: int = 5) -> list[GistSummary]:
        data = await self._request("GET", "/gists", params={"per_page": limit})
        return [GistSummary.from_api(item) for item in data]

    async def get_gist_content(self, gist_id: str) -> GistContent:
        """Return the first file of a gist."""
        data = await self._request("GET", f"/gists/{gist_id}")
        files = data.get("files") or {}
        if not files:
            raise GistClientError(f"No files found in gist {gist_id}")
        filename = next(iter(files))
        return GistContent(filename=filename, content=files[filename].get("content") or "")
