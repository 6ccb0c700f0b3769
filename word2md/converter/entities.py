"""Bounded HTML character-reference decoding applied before rendering."""

from __future__ import annotations

import re

# &lt; and &gt; are left for the renderer so literal angle brackets in text
# are never turned into markup.
_NAMED_ENTITIES: dict[str, str] = {
    "&amp;": "&",
    "&quot;": '"',
    "&#39;": "'",
    "&#x27;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&copy;": "\u00a9",
    "&reg;": "\u00ae",
    "&trade;": "\u2122",
    "&hellip;": "\u2026",
    "&mdash;": "\u2014",
    "&ndash;": "\u2013",
    "&lsquo;": "\u2018",
    "&rsquo;": "\u2019",
    "&ldquo;": "\u201c",
    "&rdquo;": "\u201d",
}

_ENTITY_RE = re.compile(r"&[#\w]+;")
_NUMERIC_RE = re.compile(r"^&#(\d+);$")
_HEX_RE = re.compile(r"^&#x([0-9a-f]+);$", re.IGNORECASE)

MAX_PASSES = 3


def _from_codepoint(value: int, entity: str) -> str:
    try:
        return chr(value)
    except (ValueError, OverflowError):
        return entity


def _replace_entity(match: re.Match[str]) -> str:
    entity = match.group(0)

    named = _NAMED_ENTITIES.get(entity)
    if named is not None:
        return named

    numeric = _NUMERIC_RE.match(entity)
    if numeric:
        return _from_codepoint(int(numeric.group(1)), entity)

    hexadecimal = _HEX_RE.match(entity)
    if hexadecimal:
        return _from_codepoint(int(hexadecimal.group(1), 16), entity)

    return entity


def decode_html_entities(html: str) -> str:
    """Decode a fixed set of named, numeric and hex references.

    Re-encoded references (``&amp;amp;``) are unwrapped by repeating the
    substitution until a pass changes nothing, capped at ``MAX_PASSES``.
    Unknown references are returned untouched.
    """
    decoded = html
    remaining = MAX_PASSES
    has_entities = "&" in decoded

    while has_entities and remaining > 0:
        previous = decoded
        decoded = _ENTITY_RE.sub(_replace_entity, decoded)
        has_entities = decoded != previous and "&" in decoded
        remaining -= 1

    return decoded
