"""Shared building blocks: typed exceptions."""
from .errors import MissingPromptVariableError, PromptNotFoundError, TemplateDirectoryNotFoundError
