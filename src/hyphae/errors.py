class ConfigError(ValueError):
    """Raised when a rule set, axiom request or growth setting is invalid."""


class StructuralError(ValueError):
    """Raised when a symbol string has unbalanced branch brackets."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
