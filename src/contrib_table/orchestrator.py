"""Top-level pipeline: fetch, enrich, render, write."""

from __future__ import annotations

import logging

from rich.console import Console

from .aggregator import collect_contributors, resolve_users
from .config import COLUMNS, DEFAULT_API_URL, DEFAULT_OUTPUT, PER_PAGE, THRESHOLD
from .github.client import GitHubClient
from .models import UserDetail
from .renderer import render_markdown, write_markdown

logger = logging.getLogger(__name__)


async def run(
    owner: str,
    repo: str,
    token: str | None = None,
    output_file: str = DEFAULT_OUTPUT,
    threshold: int = THRESHOLD,
    per_page: int = PER_PAGE,
    columns: int = COLUMNS,
    max_concurrency: int | None = None,
    api_url: str = DEFAULT_API_URL,
    console: Console | None = None,
) -> list[UserDetail]:
    """Generate the contributors file for owner/repo and return the rendered users."""
    console = console or Console(stderr=True)

    async with GitHubClient(token=token, base_url=api_url) as client:
        with console.status(f"Fetching contributors of {owner}/{repo}..."):
            contributors = await collect_contributors(
                client, owner, repo, threshold=threshold, per_page=per_page
            )
        logger.info("%d contributors with >= %d contributions", len(contributors), threshold)

        with console.status(f"Resolving {len(contributors)} user profiles..."):
            users = await resolve_users(client, contributors, max_concurrency=max_concurrency)

    skipped = len(contributors) - len(users)
    if skipped:
        logger.info("%d contributors skipped (bots or unresolved)", skipped)

    content = render_markdown(users, columns=columns, threshold=threshold)
    write_markdown(content, output_file)
    return users
