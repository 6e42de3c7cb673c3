"""Read-only prompt registry.

Templates are loaded from a directory of ``<key>.md`` files:

    templates/
      page-object.md
      feature-only.md
      ...
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from promptgen.core.errors import PromptNotFoundError, TemplateDirectoryNotFoundError
from promptgen.runtime.renderer import find_placeholders

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


@dataclass(frozen=True)
class PromptTemplate:
    """A named, immutable prompt body containing ${name} placeholders."""

    key: str
    body: str

    @property
    def placeholders(self) -> list[str]:
        return find_placeholders(self.body)


class PromptRegistry:
    """Immutable mapping of prompt key to template.

    Keys may be given as plain strings or as GeneratorType members; both
    resolve to the same template since GeneratorType is a str enum.
    """

    def __init__(self, prompts: Mapping[str, str]) -> None:
        templates = {}
        for key, body in prompts.items():
            key = self._normalize(key)
            templates[key] = PromptTemplate(key=key, body=body)
        self._templates = MappingProxyType(templates)

    @classmethod
    def from_directory(cls, base_dir: Path) -> PromptRegistry:
        """Build a registry from every ``*.md`` file in ``base_dir``.

        Raises:
            TemplateDirectoryNotFoundError: If the directory does not exist.
        """
        base_dir = Path(base_dir)
        if not base_dir.is_dir():
            raise TemplateDirectoryNotFoundError(str(base_dir))
        prompts = {
            path.stem: path.read_text(encoding='utf-8')
            for path in sorted(base_dir.glob('*.md'))
        }
        return cls(prompts)

    @staticmethod
    def _normalize(key: str) -> str:
        # str(GeneratorType.X) is not its value on every Python version
        return getattr(key, 'value', key)

    def get(self, key: str) -> PromptTemplate:
        """Look up a template by key.

        Raises:
            PromptNotFoundError: If the key is not registered.
        """
        key = self._normalize(key)
        try:
            return self._templates[key]
        except (KeyError, TypeError):
            raise PromptNotFoundError(key) from None

    def keys(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, key: object) -> bool:
        try:
            return self._normalize(key) in self._templates
        except TypeError:
            return False

    def __iter__(self) -> Iterator[PromptTemplate]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)
