"""HTML-to-markdown rendering through markdownify with a shared converter."""

from __future__ import annotations

import logging
import threading
from typing import Any

from markdownify import ATX, MarkdownConverter

from word2md.converter.entities import decode_html_entities

logger = logging.getLogger(__name__)

FENCED = "fenced"
INDENTED = "indented"

# Applied last when merging custom options, so callers cannot override them.
DEFAULT_RENDER_OPTIONS: dict[str, Any] = {
    "heading_style": ATX,
    "code_block_style": FENCED,
    "bullets": "-",
}


class GfmMarkdownConverter(MarkdownConverter):
    """markdownify converter with the GitHub-flavored pieces we rely on.

    Tables and ``~~strikethrough~~`` come from markdownify itself; this adds
    task-list checkboxes and a choice between fenced and indented code blocks.
    """

    class Options(MarkdownConverter.DefaultOptions):
        code_block_style = FENCED

    def convert_input(self, el, text, parent_tags):
        if el.get("type") != "checkbox":
            return text
        return "[x] " if el.has_attr("checked") else "[ ] "

    def convert_pre(self, el, text, parent_tags):
        if self.options["code_block_style"] != INDENTED or not text:
            return super().convert_pre(el, text, parent_tags)
        indented = "\n".join(f"    {line}" if line else "" for line in text.splitlines())
        return f"\n\n{indented}\n\n"


class MarkdownRenderer:
    """Renders HTML to markdown, reusing one converter for default options.

    The shared converter is built on first use. Calls that pass custom options
    get a throwaway converter and never touch the shared one.
    """

    def __init__(self) -> None:
        self._default: GfmMarkdownConverter | None = None
        self._lock = threading.Lock()

    @property
    def default_converter(self) -> GfmMarkdownConverter:
        if self._default is None:
            with self._lock:
                if self._default is None:
                    logger.debug("Creating shared markdown converter")
                    self._default = GfmMarkdownConverter(**DEFAULT_RENDER_OPTIONS)
        return self._default

    def converter_for(self, options: dict[str, Any] | None = None) -> GfmMarkdownConverter:
        if not options:
            return self.default_converter
        return GfmMarkdownConverter(**{**options, **DEFAULT_RENDER_OPTIONS})

    def render(self, html: str, options: dict[str, Any] | None = None) -> str:
        """Decode entities in ``html`` and render it to stripped markdown."""
        decoded = decode_html_entities(html)
        return self.converter_for(options).convert(decoded).strip()
