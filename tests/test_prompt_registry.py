from __future__ import annotations

from pathlib import Path

import pytest

from promptgen.core.errors import PromptNotFoundError, TemplateDirectoryNotFoundError
from promptgen.prompts import DEFAULT_REGISTRY, get_prompt
from promptgen.prompts.registry import PromptRegistry
from promptgen.schemas import GeneratorType


def test_default_registry_holds_every_generator_type() -> None:
    assert sorted(DEFAULT_REGISTRY.keys()) == sorted(g.value for g in GeneratorType)
    assert len(DEFAULT_REGISTRY) == 6


@pytest.mark.parametrize('generator', list(GeneratorType))
def test_template_placeholders_match_catalog(generator: GeneratorType) -> None:
    template = DEFAULT_REGISTRY.get(generator)
    assert template.key == generator.value
    assert template.placeholders == generator.placeholders


def test_get_accepts_plain_string_key() -> None:
    assert get_prompt('page-object') is DEFAULT_REGISTRY.get(GeneratorType.PAGE_OBJECT)
    assert 'Selenium Java Page Object' in get_prompt('page-object').body


def test_get_missing_key_raises() -> None:
    with pytest.raises(PromptNotFoundError) as exc_info:
        DEFAULT_REGISTRY.get('NOT_A_REAL_KEY')
    assert exc_info.value.key == 'NOT_A_REAL_KEY'
    assert 'NOT_A_REAL_KEY' in str(exc_info.value)


def test_registry_is_read_only() -> None:
    registry = PromptRegistry({'greeting': 'Hello ${name}'})
    with pytest.raises(TypeError):
        registry._templates['other'] = 'x'
    with pytest.raises(AttributeError):
        registry.get('greeting').body = 'changed'


def test_registry_copies_source_mapping() -> None:
    source = {'greeting': 'Hello ${name}'}
    registry = PromptRegistry(source)
    source['greeting'] = 'Bye'
    assert registry.get('greeting').body == 'Hello ${name}'


def test_contains_and_iteration() -> None:
    registry = PromptRegistry({'a': 'A', 'b': 'B ${x}'})
    assert 'a' in registry
    assert 'missing' not in registry
    assert [t.key for t in registry] == ['a', 'b']


def test_from_directory_loads_markdown_files(tmp_path: Path) -> None:
    # Arrange
    (tmp_path / 'custom.md').write_text('Use ${pageUrl} twice: ${pageUrl}\n', encoding='utf-8')
    (tmp_path / 'notes.txt').write_text('ignored', encoding='utf-8')

    # Act
    registry = PromptRegistry.from_directory(tmp_path)

    # Assert
    assert registry.keys() == ['custom']
    assert registry.get('custom').placeholders == ['pageUrl']


def test_from_directory_missing_dir_raises(tmp_path: Path) -> None:
    with pytest.raises(PromptNotFoundError):
        PromptRegistry.from_directory(tmp_path / 'does-not-exist')


def test_generator_labels() -> None:
    assert GeneratorType.PAGE_OBJECT.label == 'Selenium-Java-Page-Only'
    assert GeneratorType.BDD_WITH_STEPS.label == 'Pytest-With-Playwright-Steps'


def test_contains_unhashable_key_is_false() -> None:
    assert ['page-object'] not in DEFAULT_REGISTRY
    assert GeneratorType.TEST_ONLY in DEFAULT_REGISTRY


def test_from_directory_missing_dir_names_the_directory(tmp_path: Path) -> None:
    missing = tmp_path / 'no-templates-here'

    with pytest.raises(TemplateDirectoryNotFoundError) as exc_info:
        PromptRegistry.from_directory(missing)

    assert str(exc_info.value) == f'Prompt template directory not found: {missing}'
    assert exc_info.value.path == str(missing)
