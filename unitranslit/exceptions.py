"""
Custom exception hierarchy for unitranslit.

Configuration problems are surfaced to the caller immediately. Table loading
problems are raised by lookup sources and recovered inside the table store,
so they never reach callers of ``decode`` or ``to_initials``.
"""


class TranslitError(Exception):
    """Base exception for all unitranslit errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(TranslitError):
    """Configuration errors (unknown charset, invalid policy or settings)."""

    pass


class TableLoadError(TranslitError):
    """A lookup source has data for a block but it cannot be read."""

    def __init__(self, message: str, source: str, block: int):
        super().__init__(message, code="E_TABLE")
        self.source = source
        self.block = block
