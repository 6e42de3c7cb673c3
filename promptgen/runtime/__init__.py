"""Runtime pieces shared by the API and the CLI."""
from .renderer import PromptRenderer, find_placeholders
