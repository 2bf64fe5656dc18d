"""Async GitHub REST client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .. import __version__
from ..config import DEFAULT_API_URL
from .rate_limit import RateLimitMonitor

logger = logging.getLogger(__name__)


class GitHubAPIError(RuntimeError):
    """A GitHub request failed or returned an unusable body."""


class GitHubClient:
    """Thin wrapper over httpx.AsyncClient returning parsed JSON bodies.

    Response status codes are not checked: GitHub reports errors as a JSON
    object with a ``message`` field and callers decide what shape they need.
    Requests are never retried and have no timeout.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_API_URL,
        rate_limit: RateLimitMonitor | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"contrib-table/{__version__}",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.base_url = base_url.rstrip("/")
        self.rate_limit = rate_limit or RateLimitMonitor()
        self._client = httpx.AsyncClient(
            headers=headers, timeout=None, transport=transport
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def contributors_url(self, owner: str, repo: str) -> str:
        return f"{self.base_url}/repos/{owner}/{repo}/contributors"

    async def fetch_json(self, url: str | None, params: dict[str, Any] | None = None) -> Any:
        """GET ``url`` and return its decoded JSON body, or None when there is no url."""
        if not url:
            return None
        await self.rate_limit.wait_if_needed()
        logger.debug("GET %s %s", url, params or "")
        try:
            resp = await self._client.get(url, params=params)
        except httpx.RequestError as exc:
            raise GitHubAPIError(f"GitHub request error: {type(exc).__name__} {exc!r}") from exc
        self.rate_limit.update(resp)
        try:
            return resp.json()
        except ValueError as exc:
            raise GitHubAPIError(
                f"GitHub {resp.status_code}: response from {url} is not JSON"
            ) from exc
