"""Text-level rewrites applied to rendered markdown."""

import re

_NUMBERED_LIST_RE = re.compile(r"^(\s*)\d+\.\s", re.MULTILINE)

UNICODE_SPACE_MAP: dict[str, str] = {
    "\u00a0": " ",  # no-break space
    "\u2007": " ",  # figure space
    "\u202f": " ",  # narrow no-break space
    "\u2060": "",  # word joiner
    "\ufeff": "",  # zero-width no-break space (BOM)
}

SMART_QUOTE_MAP: dict[str, str] = {
    "\u201c": '"',
    "\u201d": '"',
    "\u2018": "'",
    "\u2019": "'",
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
}

_UNICODE_SPACE_RE = re.compile("[" + "".join(UNICODE_SPACE_MAP) + "]")
_SMART_QUOTE_RE = re.compile("[" + "".join(SMART_QUOTE_MAP) + "]")


def convert_numbered_lists_to_bullets(md: str) -> str:
    """Rewrite ``1. item`` lines as ``- item``, keeping indentation."""
    return _NUMBERED_LIST_RE.sub(r"\1- ", md)


def normalize_text(md: str) -> str:
    """Replace unicode spaces, then smart quotes and dashes, in two passes."""
    md = _UNICODE_SPACE_RE.sub(lambda m: UNICODE_SPACE_MAP[m.group(0)], md)
    return _SMART_QUOTE_RE.sub(lambda m: SMART_QUOTE_MAP[m.group(0)], md)
