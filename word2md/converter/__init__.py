"""Word document conversion pipeline."""

from word2md.converter.converter import (
    UNSUPPORTED_DOC_MESSAGE,
    WordConverter,
    validate_file_extension,
)
from word2md.converter.entities import decode_html_entities
from word2md.converter.html import process_html
from word2md.converter.lint import MarkdownLinter
from word2md.converter.models import ConversionResult, ConvertOptions, UnsupportedFileError
from word2md.converter.normalize import convert_numbered_lists_to_bullets, normalize_text
from word2md.converter.renderer import DEFAULT_RENDER_OPTIONS, MarkdownRenderer

__all__ = [
    "ConversionResult",
    "ConvertOptions",
    "DEFAULT_RENDER_OPTIONS",
    "MarkdownLinter",
    "MarkdownRenderer",
    "UNSUPPORTED_DOC_MESSAGE",
    "UnsupportedFileError",
    "WordConverter",
    "convert_numbered_lists_to_bullets",
    "decode_html_entities",
    "normalize_text",
    "process_html",
    "validate_file_extension",
]
