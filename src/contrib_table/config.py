"""Fixed defaults for contrib-table."""

from __future__ import annotations

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_OUTPUT = "CONTRIBUTORS.md"

PER_PAGE = 100
THRESHOLD = 3
COLUMNS = 5
AVATAR_SIZE = 100

BOT_TYPE = "Bot"

IGNORED_LOGINS = frozenset({
    "allcontributors",
    "codecov",
    "dependabot",
    "dependabot-preview",
    "github-actions",
    "greenkeeper",
    "imgbot",
    "renovate",
    "snyk-bot",
})
