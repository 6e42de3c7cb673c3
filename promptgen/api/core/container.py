# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from promptgen.config import settings
from promptgen.prompts import DEFAULT_REGISTRY
from promptgen.prompts.registry import PromptRegistry
from promptgen.runtime.renderer import PromptRenderer


class Container:
    def __init__(self):
        if settings.templates_dir is not None:
            self._registry = PromptRegistry.from_directory(settings.templates_dir)
        else:
            self._registry = DEFAULT_REGISTRY
        self._renderer = PromptRenderer(strict=settings.strict_rendering)

    @property
    def registry(self):
        return self._registry

    @property
    def renderer(self):
        return self._renderer


@lru_cache
def get_container():
    return Container()
