"""Data models for contrib-table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ContributorSummary:
    login: str | None
    type: str | None
    contributions: int
    url: str | None
    avatar_url: str | None = None
    html_url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ContributorSummary:
        return cls(
            login=data.get("login"),
            type=data.get("type"),
            contributions=data.get("contributions") or 0,
            url=data.get("url"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
        )


@dataclass
class UserDetail:
    login: str
    name: str | None
    avatar_url: str
    html_url: str

    @classmethod
    def from_api(
        cls, data: dict[str, Any], fallback_avatar_url: str | None = None
    ) -> UserDetail:
        return cls(
            login=data["login"],
            name=data.get("name"),
            avatar_url=data.get("avatar_url") or fallback_avatar_url or "",
            html_url=data.get("html_url") or "",
        )

    @property
    def label(self) -> str:
        """Display name if the user set one, else the login."""
        return self.name or self.login
