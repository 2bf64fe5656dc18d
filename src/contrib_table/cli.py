"""Command-line interface for contrib-table."""

from __future__ import annotations

import asyncio
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import COLUMNS, DEFAULT_API_URL, DEFAULT_OUTPUT, PER_PAGE, THRESHOLD
from .github.client import GitHubAPIError
from .orchestrator import run


def _parse_target(target: str) -> tuple[str, str]:
    owner, sep, repo = target.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise click.BadParameter("expected OWNER/REPO", param_hint="TARGET")
    return owner, repo


def _setup_logging(verbose: bool, console: Console) -> None:
    """Route the package's log records to the given (stderr) console."""
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger = logging.getLogger("contrib_table")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command()
@click.argument("target")
@click.option("--token", envvar="GITHUB_TOKEN", default=None, help="GitHub token (or set GITHUB_TOKEN).")
@click.option("--output", "-o", "output_file", default=DEFAULT_OUTPUT, show_default=True, type=click.Path(dir_okay=False), help="Markdown file to write.")
@click.option("--threshold", default=THRESHOLD, show_default=True, type=click.IntRange(min=0), help="Minimum contributions to be listed.")
@click.option("--columns", default=COLUMNS, show_default=True, type=click.IntRange(min=1), help="Avatars per table row.")
@click.option("--per-page", default=PER_PAGE, show_default=True, type=click.IntRange(1, 100), help="Contributors requested per page.")
@click.option("--max-concurrency", default=None, type=click.IntRange(min=1), help="Limit concurrent profile requests (default: unlimited).")
@click.option("--api-url", default=DEFAULT_API_URL, show_default=True, help="GitHub API base URL.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__)
def main(
    target: str,
    token: str | None,
    output_file: str,
    threshold: int,
    columns: int,
    per_page: int,
    max_concurrency: int | None,
    api_url: str,
    verbose: bool,
) -> None:
    """Generate a contributors table for TARGET (owner/repo)."""
    owner, repo = _parse_target(target)
    console = Console(stderr=True)
    _setup_logging(verbose, console)

    try:
        asyncio.run(run(
            owner=owner,
            repo=repo,
            token=token or None,
            output_file=output_file,
            threshold=threshold,
            per_page=per_page,
            columns=columns,
            max_concurrency=max_concurrency,
            api_url=api_url,
            console=console,
        ))
    except (GitHubAPIError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
