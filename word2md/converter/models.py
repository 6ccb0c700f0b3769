"""Pydantic models and errors for the conversion pipeline."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from word2md.config.models import ExtractionOptions


class UnsupportedFileError(ValueError):
    """Raised for legacy .doc input, before any extraction is attempted."""

    kind = "unsupported_format"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConvertOptions(BaseModel):
    """Per-call options for a conversion.

    ``render`` holds markdownify keyword options. An empty mapping selects the
    shared default converter.
    """

    extraction: ExtractionOptions | None = None
    render: dict[str, Any] = Field(default_factory=dict)


class ConversionResult(BaseModel):
    """Result of converting a Word document to markdown."""

    markdown: str
    source: str
    size: int
    messages: list[str] = Field(default_factory=list)
