"""Locate, read and validate word2md configuration."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Word2MdConfig

PORT_ENV = "PORT"
_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest precedence first."""
    paths = [Path("word2md.yaml"), Path.home() / ".word2md" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> Word2MdConfig:
    """Load the first non-empty config file, falling back to defaults.

    An explicit ``cli_path`` must exist. ``$PORT`` supplies ``server.port``
    when the file does not set it. Any problem is raised as ``ValueError``.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    raw: dict = {}
    source = "defaults"
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        data = _read_yaml(path)
        if data:
            raw, source = data, str(path)
            break

    raw = _apply_port_env(raw)
    try:
        return Word2MdConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {source}: {e}") from e


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config in {path}: top level must be a mapping")
    return _expand_env_vars(data)


def _apply_port_env(raw: dict) -> dict:
    port = os.environ.get(PORT_ENV)
    server = raw.get("server") or {}
    if not port or "port" in server:
        return raw
    return {**raw, "server": {**server, "port": port}}


def _expand_env_vars(obj: object) -> object:
    """Replace ``${VAR}`` in string values; unset variables become empty."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `word2md config init`
DEFAULT_CONFIG_TEMPLATE = """\
# word2md.yaml

# HTTP server
server:
  host: "0.0.0.0"
  # port: 3000                 # defaults to $PORT, then 3000
  # static_dir: "./dist"       # serve a front-end bundle at /

# DOCX -> HTML extraction (mammoth)
extraction:
  # style_map: |
  #   p[style-name='Code'] => pre
  include_default_style_map: true
  ignore_empty_paragraphs: true

# Markdown lint / auto-fix
lint:
  enabled: true
  disabled_rules: []           # e.g. [md013, md041]
  report_unfixed: false        # log violations left after auto-fix

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
