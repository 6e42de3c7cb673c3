"""Schemas for the prompt catalog and the HTTP surface.

- GeneratorType enumerates the closed set of prompt keys.
- Request/response models describe what the API accepts and returns.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GeneratorType(str, Enum):
    """Supported code generator prompts.

    Examples:
        >>> GeneratorType('feature-only').label
        'Cucumber-Only'
    """

    # Java + Selenium
    PAGE_OBJECT = 'page-object'
    FEATURE_ONLY = 'feature-only'
    FEATURE_WITH_STEPS = 'feature-with-steps'
    # Python + Playwright
    PAGEOBJECT_ALT = 'pageobject-alt'
    TEST_ONLY = 'test-only'
    BDD_WITH_STEPS = 'bdd-with-steps'

    @property
    def label(self) -> str:
        return GENERATOR_CATALOG[self]['label']

    @property
    def placeholders(self) -> list[str]:
        return list(GENERATOR_CATALOG[self]['placeholders'])


GENERATOR_CATALOG = {
    GeneratorType.PAGE_OBJECT: {
        'label': 'Selenium-Java-Page-Only',
        'placeholders': ('domContent',),
    },
    GeneratorType.FEATURE_ONLY: {
        'label': 'Cucumber-Only',
        'placeholders': ('domContent',),
    },
    GeneratorType.FEATURE_WITH_STEPS: {
        'label': 'Cucumber-With-Selenium-Java-Steps',
        'placeholders': ('domContent', 'pageUrl'),
    },
    GeneratorType.PAGEOBJECT_ALT: {
        'label': 'Playwright-Python-Page-Only',
        'placeholders': ('domContent', 'pageUrl'),
    },
    GeneratorType.TEST_ONLY: {
        'label': 'Pytest-Playwright-Only',
        'placeholders': ('domContent', 'pageUrl'),
    },
    GeneratorType.BDD_WITH_STEPS: {
        'label': 'Pytest-With-Playwright-Steps',
        'placeholders': ('domContent', 'pageUrl'),
    },
}


def label_for(key: str) -> str | None:
    """Return the display label of a key, or None for keys outside the catalog."""
    try:
        return GeneratorType(key).label
    except ValueError:
        return None


class PromptSummary(BaseModel):
    key: str
    label: str | None = None
    placeholders: list[str] = Field(default_factory=list)


class PromptDetail(PromptSummary):
    body: str


class RenderPromptIn(BaseModel):
    """Variables to substitute into a prompt template."""

    variables: dict[str, str] = Field(
        default_factory=dict,
        description='Mapping of placeholder name (e.g. domContent, pageUrl) to value.',
    )


class RenderPromptOut(BaseModel):
    key: str
    prompt: str
    unresolved: list[str] = Field(
        default_factory=list,
        description='Placeholders left verbatim because no value was supplied.',
    )
