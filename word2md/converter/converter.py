"""Word-to-markdown conversion pipeline built on mammoth and markdownify."""

from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path
from typing import Any, BinaryIO

import mammoth

from word2md.config.models import ExtractionOptions, LintConfig
from word2md.converter.html import process_html
from word2md.converter.lint import MarkdownLinter
from word2md.converter.models import (
    ConversionResult,
    ConvertOptions,
    UnsupportedFileError,
)
from word2md.converter.normalize import (
    convert_numbered_lists_to_bullets,
    normalize_text,
)
from word2md.converter.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

Source = str | Path | bytes | bytearray | memoryview

UNSUPPORTED_DOC_MESSAGE = (
    "This tool only supports .docx files, not .doc files. "
    "Please save your document as a .docx file and try again."
)


def validate_file_extension(file_path: str | Path) -> None:
    """Reject legacy .doc files; every other extension is allowed through."""
    if Path(str(file_path)).suffix.lower() == ".doc":
        raise UnsupportedFileError(UNSUPPORTED_DOC_MESSAGE)


def _extract_html(stream: BinaryIO, options: ExtractionOptions) -> tuple[str, list[str]]:
    kwargs: dict[str, Any] = {
        "include_default_style_map": options.include_default_style_map,
        "ignore_empty_paragraphs": options.ignore_empty_paragraphs,
    }
    if options.style_map:
        kwargs["style_map"] = options.style_map

    result = mammoth.convert_to_html(stream, **kwargs)
    messages = [f"{m.type}: {m.message}" for m in result.messages]
    return result.value, messages


class WordConverter:
    """Converts .docx files or buffers to linted GitHub-flavored markdown.

    The renderer is an explicit dependency so an application can build one at
    startup and share its cached converter across every request.
    """

    def __init__(
        self,
        renderer: MarkdownRenderer | None = None,
        linter: MarkdownLinter | None = None,
        extraction: ExtractionOptions | None = None,
        lint: LintConfig | None = None,
    ) -> None:
        self.renderer = renderer or MarkdownRenderer()
        self.linter = linter or MarkdownLinter(lint)
        self._extraction = extraction or ExtractionOptions()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def convert(self, source: Source, options: ConvertOptions | None = None) -> str:
        """Convert a .docx path or in-memory buffer to markdown."""
        result = await self.convert_with_result(source, options)
        return result.markdown

    async def convert_with_result(
        self, source: Source, options: ConvertOptions | None = None
    ) -> ConversionResult:
        options = options or ConvertOptions()
        extraction = options.extraction or self._extraction

        if isinstance(source, (bytes, bytearray, memoryview)):
            data = bytes(source)
            label = "<bytes>"
            html, messages = await asyncio.to_thread(
                _extract_html, io.BytesIO(data), extraction
            )
            size = len(data)
        else:
            validate_file_extension(source)
            path = Path(source)
            label = str(path)
            html, messages = await asyncio.to_thread(self._extract_file, path, extraction)
            size = path.stat().st_size

        for message in messages:
            logger.debug("mammoth %s: %s", label, message)

        markdown = self.markdown_from_html(html, options.render)
        logger.info("Converted %s (%d bytes -> %d chars)", label, size, len(markdown))
        return ConversionResult(markdown=markdown, source=label, size=size, messages=messages)

    def markdown_from_html(self, html: str, render_options: dict[str, Any] | None = None) -> str:
        """Run the post-extraction pipeline on raw HTML."""
        processed = process_html(html)
        md = self.renderer.render(processed, render_options)
        md = convert_numbered_lists_to_bullets(md)
        md = normalize_text(md)
        return self.linter.lint(md)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_file(path: Path, options: ExtractionOptions) -> tuple[str, list[str]]:
        with open(path, "rb") as f:
            return _extract_html(f, options)
