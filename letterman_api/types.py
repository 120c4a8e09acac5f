"""
    Enumerations shared by the search core, the formatter and the CLI.
"""
from enum import Enum


class SearchMode(Enum):
    """Work collection used by the search engine"""
    QUEUE = "queue"     # breadth first
    STACK = "stack"     # depth first


class OutputFormat(Enum):
    """How a found morph is rendered"""
    WORD = "W"
    MODIFICATION = "M"

    @classmethod
    def from_flag(cls, value: str) -> 'OutputFormat':
        """Map the single-letter CLI flag value onto a format"""
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown output format: {value}")


class EditKind(Enum):
    """Kind of a single modification, valued by its output letter"""
    SUBSTITUTE = "c"
    DELETE = "d"
    INSERT = "i"
    SWAP = "s"

    @property
    def letter(self) -> str:
        return self.value


class ExpansionMode(Enum):
    """Dictionary mode, valued by its marker line"""
    SIMPLE = "S"
    COMPLEX = "C"

    @classmethod
    def from_marker(cls, marker: str) -> 'ExpansionMode':
        for mode in cls:
            if mode.value == marker:
                return mode
        raise ValueError(f"Unknown dictionary mode: {marker}")
