from .loader import load_config
from .models import (
    ExtractionOptions,
    LintConfig,
    ServerConfig,
    Word2MdConfig,
)

__all__ = [
    "ExtractionOptions",
    "LintConfig",
    "ServerConfig",
    "Word2MdConfig",
    "load_config",
]
