"""Exception types raised by typegen."""


class UnsupportedLanguageError(ValueError):
    """Raised when a target language has no registered emitter."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported target language: {language}")


class ConfigError(RuntimeError):
    """Raised when an options file cannot be read or parsed."""


class InputTooDeepError(ValueError):
    """Raised when a JSON sample nests containers deeper than the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"JSON sample nests deeper than {limit} levels")
