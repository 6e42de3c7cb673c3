# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class PromptNotFoundError(RuntimeError):
    """Raised when a prompt key is not present in the registry."""

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f'Prompt not found: {key}')
        self.key = key


class TemplateDirectoryNotFoundError(PromptNotFoundError):
    """Raised when a prompt template directory does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f'Prompt template directory not found: {path}')
        self.path = path


class MissingPromptVariableError(ValueError):
    """Raised by strict rendering when placeholders are left unresolved."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f'Missing prompt variable(s): {", ".join(missing)}')
        self.missing = missing
