"""Prompt templates for LLM-driven UI test code generation."""
from promptgen.core.errors import MissingPromptVariableError, PromptNotFoundError
from promptgen.prompts import DEFAULT_REGISTRY, get_prompt, render
from promptgen.schemas import GeneratorType

__version__ = '1.0.0'
