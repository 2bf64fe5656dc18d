"""Markdown renderer for the contributors table."""

from __future__ import annotations

from html import escape

from rich.console import Console

from .config import AVATAR_SIZE, COLUMNS, THRESHOLD
from .models import UserDetail

_PREAMBLE = """\
<!--
  This file is generated by contrib-table. Do not edit it by hand:
  changes will be overwritten the next time it is regenerated.
-->

# Contributors

Thanks to everyone who has contributed to this project!

"""

_POSTAMBLE = """\

Contributors with at least {threshold} contributions are listed here. \
Automated accounts are not included.
"""


def _sized_avatar(url: str, size: int = AVATAR_SIZE) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}s={size}"


def _render_cell(user: UserDetail) -> str:
    image = ""
    if user.avatar_url:
        image = (
            f'<img src="{escape(_sized_avatar(user.avatar_url))}" '
            f'width="{AVATAR_SIZE}px;" alt=""/><br />'
        )
    return (
        f'    <td align="center">'
        f'<a href="{escape(user.html_url)}">{image}'
        f"<sub><b>{escape(user.label)}</b></sub></a></td>"
    )


def render_markdown(
    users: list[UserDetail],
    columns: int = COLUMNS,
    threshold: int = THRESHOLD,
) -> str:
    """Render users as an HTML table inside a markdown document.

    Users are laid out in the order given, ``columns`` per row.
    """
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")

    lines = ["<table>"]
    for i, user in enumerate(users):
        if i % columns == 0:
            if i:
                lines.append("  </tr>")
            lines.append("  <tr>")
        lines.append(_render_cell(user))
    if users:
        lines.append("  </tr>")
    lines.append("</table>")

    return _PREAMBLE + "\n".join(lines) + "\n" + _POSTAMBLE.format(threshold=threshold)


def write_markdown(content: str, output_file: str) -> None:
    """Write content to a file and print confirmation."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    Console(stderr=True).print(f"Saved to {output_file}")
