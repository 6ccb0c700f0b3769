from typing import Literal

from pydantic import BaseModel, Field


class ExtractionOptions(BaseModel):
    """Options forwarded to ``mammoth.convert_to_html``."""

    style_map: str | None = None
    include_default_style_map: bool = True
    ignore_empty_paragraphs: bool = True


class LintConfig(BaseModel):
    enabled: bool = True
    disabled_rules: list[str] = []
    report_unfixed: bool = False


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str | None = None


class Word2MdConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    extraction: ExtractionOptions = Field(default_factory=ExtractionOptions)
    lint: LintConfig = Field(default_factory=LintConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
