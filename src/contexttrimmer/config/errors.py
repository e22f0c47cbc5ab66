"""Configuration exceptions."""

class ConfigError(Exception):
    """Base exception for invalid trimmer configuration."""
    pass

class InvalidBudgetError(ConfigError, ValueError):
    """Raised when the token budget is not a positive integer at trim time."""

    def __init__(self, max_tokens):
        self.max_tokens = max_tokens
        super().__init__(f"Token limit must be greater than zero, got {max_tokens}")

class UnknownOptionError(ConfigError, KeyError):
    """Raised when an option name is outside the recognized set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Option "{name}" does not exist')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
