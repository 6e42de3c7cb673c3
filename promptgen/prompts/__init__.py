"""Default prompt registry and the render entry point."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from promptgen.prompts.registry import TEMPLATES_DIR, PromptRegistry, PromptTemplate
from promptgen.runtime.renderer import PromptRenderer

# Built once at import; never mutated afterwards.
DEFAULT_REGISTRY = PromptRegistry.from_directory(TEMPLATES_DIR)


def get_prompt(key: str) -> PromptTemplate:
    """Return the raw, unsubstituted template for ``key``."""
    return DEFAULT_REGISTRY.get(key)


def render(key: str, variables: Mapping[str, Any] | None = None, *, strict: bool = False) -> str:
    """Render the prompt registered under ``key``.

    Args:
        key: Prompt key, e.g. "feature-with-steps".
        variables: Placeholder values such as domContent and pageUrl.
        strict: Fail instead of leaving unresolved placeholders verbatim.

    Returns:
        The rendered, trimmed prompt.

    Raises:
        PromptNotFoundError: If ``key`` is not registered.
        MissingPromptVariableError: In strict mode, if placeholders are unresolved.
    """
    template = DEFAULT_REGISTRY.get(key)
    return PromptRenderer(strict=strict).render(template.body, variables)
