"""Markdown lint and auto-fix stage backed by pymarkdown."""

from __future__ import annotations

import logging

from pymarkdown.api import PyMarkdownApi

from word2md.config.models import LintConfig

logger = logging.getLogger(__name__)


class MarkdownLinter:
    """Applies pymarkdown's auto-fixes to an in-memory markdown string.

    Fixes are applied once; the text is not re-linted to a fixed point, and
    violations the linter cannot fix are not returned to the caller.
    """

    def __init__(self, config: LintConfig | None = None) -> None:
        self._config = config or LintConfig()

    def _api(self) -> PyMarkdownApi:
        api = PyMarkdownApi()
        for rule_id in self._config.disabled_rules:
            api.disable_rule_by_identifier(rule_id.lower())
        return api

    def lint(self, markdown: str) -> str:
        # pymarkdown rejects blank input; a document with no text is valid
        if not self._config.enabled or not markdown.strip():
            return markdown.strip()

        result = self._api().fix_string(markdown)
        fixed = result.fixed_file if result.was_fixed else markdown

        if self._config.report_unfixed:
            self._report_unfixed(fixed)

        return fixed.strip()

    def _report_unfixed(self, markdown: str) -> None:
        scan = self._api().scan_string(markdown)
        for failure in scan.scan_failures:
            logger.warning(
                "Unfixed lint violation %s (%s) at line %d: %s",
                failure.rule_id,
                failure.rule_name,
                failure.line_number,
                failure.rule_description,
            )
