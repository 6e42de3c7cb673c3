"""Prompt renderer (single-pass placeholder substitution).

We keep rendering separate so:
- it can be tested independently
- it can be reused by the API and the CLI
- prompt templates stay clean and diffable
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from promptgen.core.errors import MissingPromptVariableError

# Matches the whole ${name} token, never a bare substring of it.
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^${}]+)\}')


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance, without duplicates."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


class PromptRenderer:
    """Render prompt templates containing ${var} placeholders.

    By default rendering is permissive: placeholders without a value are
    left in the output verbatim. With ``strict=True`` they raise instead.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def render(self, template: str, variables: Mapping[str, Any] | None = None) -> str:
        """Render a prompt template.

        Args:
            template: Prompt template containing ${var} placeholders.
            variables: Mapping of variable names to values. Names the
                template does not reference are ignored.

        Returns:
            Rendered prompt with leading/trailing whitespace removed.

        Raises:
            MissingPromptVariableError: In strict mode, if any placeholder
                has no value.
        """
        variables = variables or {}
        if self.strict:
            missing = self.unresolved(template, variables)
            if missing:
                raise MissingPromptVariableError(missing)

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in variables:
                return match.group(0)
            return str(variables[name])

        return PLACEHOLDER_PATTERN.sub(_substitute, template).strip()

    def unresolved(self, template: str, variables: Mapping[str, Any] | None = None) -> list[str]:
        """List placeholders of ``template`` that ``variables`` does not cover."""
        variables = variables or {}
        return [name for name in find_placeholders(template) if name not in variables]
