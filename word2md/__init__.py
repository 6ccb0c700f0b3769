"""word2md - convert Word documents to clean GitHub-flavored Markdown."""

from word2md.config import Word2MdConfig, load_config
from word2md.converter import (
    ConversionResult,
    ConvertOptions,
    MarkdownLinter,
    MarkdownRenderer,
    UnsupportedFileError,
    WordConverter,
    validate_file_extension,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "ConvertOptions",
    "MarkdownLinter",
    "MarkdownRenderer",
    "UnsupportedFileError",
    "Word2MdConfig",
    "WordConverter",
    "load_config",
    "validate_file_extension",
]
