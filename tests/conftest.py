"""Shared test fixtures for word2md."""

import pytest
from unittest.mock import MagicMock, patch

from word2md.config.models import Word2MdConfig
from word2md.converter import MarkdownRenderer, WordConverter


@pytest.fixture
def renderer():
    return MarkdownRenderer()


@pytest.fixture
def converter(renderer):
    return WordConverter(renderer=renderer)


@pytest.fixture
def sample_config():
    return Word2MdConfig()


def _mammoth_result(html, messages=()):
    result = MagicMock()
    result.value = html
    result.messages = list(messages)
    return result


@pytest.fixture
def mammoth_result():
    """Factory for fake ``mammoth.convert_to_html`` results."""
    return _mammoth_result


@pytest.fixture
def mock_mammoth():
    """Patch the mammoth extraction call; set ``return_value`` per test."""
    with patch("word2md.converter.converter.mammoth.convert_to_html") as mocked:
        mocked.return_value = _mammoth_result("<p>Hello&nbsp;World</p>")
        yield mocked


@pytest.fixture
def docx_file(tmp_path):
    """A placeholder .docx on disk (content is never parsed; mammoth is mocked)."""
    path = tmp_path / "report.docx"
    path.write_bytes(b"PK\x03\x04 fake docx payload")
    return path
