# letterman_api/exceptions.py
"""
    Error hierarchy shared by the core services, the plugins and the CLI.
"""
from typing import Optional


class LettermanError(Exception):
    """Base class for every error the platform raises on purpose."""
    pass


class ConfigurationError(LettermanError):
    """Raised when the search configuration is contradictory or incomplete."""
    pass


class DictionaryFormatError(LettermanError):
    """Raised when a dictionary source cannot be read."""
    pass


class MalformedEntryError(DictionaryFormatError):
    """Raised when an annotated dictionary entry cannot be expanded."""

    def __init__(self, entry: str, reason: str):
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid word in dictionary: '{entry}' ({reason})")


class DuplicateTerminalError(LettermanError):
    """Raised when the begin or end word appears more than once among candidates."""

    def __init__(self, word: str, terminal: str):
        self.word = word
        self.terminal = terminal
        label = "Beginning" if terminal == "begin" else "End"
        super().__init__(f"{label} word in dictionary twice")


class MissingTerminalError(LettermanError):
    """Raised when the begin or end word is not among the candidates."""

    def __init__(self, word: str, terminal: str, message: Optional[str] = None):
        self.word = word
        self.terminal = terminal
        label = "Beginning" if terminal == "begin" else "Ending"
        super().__init__(message or f"{label} word does not exist in the dictionary")
