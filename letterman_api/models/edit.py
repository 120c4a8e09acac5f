"""
    Edit descriptors - the single modification that connects two
    adjacent words of a morph.

    Each descriptor is an immutable value.  ``position`` is always an
    index into the *earlier* word of the transformation.
"""
from dataclasses import dataclass
from typing import Union

from ..types import EditKind


@dataclass(frozen=True)
class Substitute:
    """Replace the letter at ``position`` with ``new_char``"""
    position: int
    new_char: str

    kind = EditKind.SUBSTITUTE

    def to_line(self) -> str:
        return f"{self.kind.letter},{self.position},{self.new_char}"


@dataclass(frozen=True)
class Delete:
    """Remove the letter at ``position``"""
    position: int

    kind = EditKind.DELETE

    def to_line(self) -> str:
        return f"{self.kind.letter},{self.position}"


@dataclass(frozen=True)
class Insert:
    """Insert ``new_char`` so that it ends up at ``position``"""
    position: int
    new_char: str

    kind = EditKind.INSERT

    def to_line(self) -> str:
        return f"{self.kind.letter},{self.position},{self.new_char}"


@dataclass(frozen=True)
class Swap:
    """Exchange the letters at ``position`` and ``position + 1``"""
    position: int

    kind = EditKind.SWAP

    def to_line(self) -> str:
        return f"{self.kind.letter},{self.position}"


EditDescriptor = Union[Substitute, Delete, Insert, Swap]


def apply_edit(word: str, edit: EditDescriptor) -> str:
    """
    Apply ``edit`` to ``word`` and return the resulting word.

    Used to replay a chain of modifications from the start word.
    """
    pos = edit.position
    if isinstance(edit, Substitute):
        return word[:pos] + edit.new_char + word[pos + 1:]
    if isinstance(edit, Delete):
        return word[:pos] + word[pos + 1:]
    if isinstance(edit, Insert):
        return word[:pos] + edit.new_char + word[pos:]
    if isinstance(edit, Swap):
        return word[:pos] + word[pos + 1] + word[pos] + word[pos + 2:]
    raise TypeError(f"Not an edit descriptor: {edit!r}")
