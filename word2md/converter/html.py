"""Single-pass structural cleanup of extracted HTML."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

# Bullet glyphs Word pastes into list item text.
UNICODE_BULLETS = ("•", "◦", "▪", "▫", "‣", "⁃", "∙", "·")

_BULLET_RE = re.compile(r"^\s*[" + re.escape("".join(UNICODE_BULLETS)) + r"]\s*")


def _is_blank_row(cells: list[Tag]) -> bool:
    return not cells or all(not cell.get_text().strip() for cell in cells)


def _promote_cells(cells: list[Tag]) -> None:
    for cell in cells:
        cell.name = "th"


def _promote_table_header(table: Tag) -> None:
    first_row = table.find("tr")
    if first_row is None or first_row.find("th") is not None:
        return

    cells = first_row.find_all("td")
    if not _is_blank_row(cells):
        _promote_cells(cells)
        return

    # Word often emits a blank lead-in row; the next row is the real header.
    first_row.decompose()
    next_row = table.find("tr")
    if next_row is not None:
        _promote_cells(next_row.find_all("td"))


def _strip_leading_bullet(item: Tag) -> None:
    first = item.contents[0] if item.contents else None
    if not isinstance(first, NavigableString) or isinstance(first, PreformattedString):
        return

    cleaned = _BULLET_RE.sub("", str(first), count=1)
    if cleaned != str(first):
        first.replace_with(cleaned)


def process_html(html: str) -> str:
    """Promote table headers and strip pasted bullet glyphs.

    The document is parsed once, both rewrites mutate the same tree, and it is
    serialized once.
    """
    soup = BeautifulSoup(html, "html.parser")

    for table in soup.find_all("table"):
        _promote_table_header(table)

    for item in soup.select("ul > li"):
        _strip_leading_bullet(item)

    return str(soup)
