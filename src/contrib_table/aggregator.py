"""Contributor pagination, filtering and user detail resolution."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from .config import BOT_TYPE, IGNORED_LOGINS, PER_PAGE, THRESHOLD
from .github.client import GitHubAPIError, GitHubClient
from .models import ContributorSummary, UserDetail

logger = logging.getLogger(__name__)


def _is_bot(contributor: ContributorSummary) -> bool:
    """Check if a contributor is an automation account."""
    login = contributor.login or ""
    if contributor.type == BOT_TYPE or login.endswith("[bot]"):
        return True
    return login.lower() in IGNORED_LOGINS


def _qualifying(page: list[dict], threshold: int) -> list[ContributorSummary]:
    return [
        ContributorSummary.from_api(entry)
        for entry in page
        if (entry.get("contributions") or 0) >= threshold
    ]


async def iter_contributor_pages(
    client: GitHubClient,
    owner: str,
    repo: str,
    threshold: int = THRESHOLD,
    per_page: int = PER_PAGE,
) -> AsyncIterator[list[ContributorSummary]]:
    """Yield one batch of qualifying contributors per page, starting at page 1.

    GitHub returns contributors sorted by contribution count, so paging stops
    as soon as a page has fewer than ``per_page`` qualifying entries. A last
    page that happens to be exactly full still costs one extra request.
    """
    url = client.contributors_url(owner, repo)
    page = 1
    while True:
        body = await client.fetch_json(url, params={"per_page": per_page, "page": page})
        if not isinstance(body, list):
            message = body.get("message") if isinstance(body, dict) else None
            raise GitHubAPIError(
                message or f"Unexpected response for {owner}/{repo} contributors page {page}"
            )
        batch = _qualifying(body, threshold)
        logger.debug("Page %d: %d/%d contributors qualify", page, len(batch), len(body))
        yield batch
        if len(batch) != per_page:
            return
        page += 1


async def collect_contributors(
    client: GitHubClient,
    owner: str,
    repo: str,
    threshold: int = THRESHOLD,
    per_page: int = PER_PAGE,
) -> list[ContributorSummary]:
    contributors: list[ContributorSummary] = []
    async for batch in iter_contributor_pages(
        client, owner, repo, threshold=threshold, per_page=per_page
    ):
        contributors.extend(batch)
    return contributors


async def resolve_users(
    client: GitHubClient,
    contributors: list[ContributorSummary],
    max_concurrency: int | None = None,
) -> list[UserDetail]:
    """Fetch user details for every human contributor.

    All requests run concurrently. A failed request only drops that user;
    results keep the order of ``contributors``.
    """
    humans = [c for c in contributors if c.login and not _is_bot(c)]
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _fetch(contributor: ContributorSummary):
        if semaphore is None:
            return await client.fetch_json(contributor.url)
        async with semaphore:
            return await client.fetch_json(contributor.url)

    results = await asyncio.gather(
        *(_fetch(c) for c in humans), return_exceptions=True
    )

    users: list[UserDetail] = []
    for contributor, result in zip(humans, results):
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, BaseException):
            logger.warning("Skipping %s: %s", contributor.login, result)
            continue
        if not isinstance(result, dict) or not result.get("login"):
            logger.warning("Skipping %s: no user details", contributor.login)
            continue
        users.append(
            UserDetail.from_api(result, fallback_avatar_url=contributor.avatar_url)
        )
    return users
