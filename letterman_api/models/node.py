"""
    SearchNode - one candidate word inside a search arena.
"""
from dataclasses import dataclass
from typing import Optional

from .edit import EditDescriptor


@dataclass
class SearchNode:
    """
    A word of the candidate list together with its discovery record.

    Attributes:
        word:     The candidate word (shared with the candidate list).
        edit:     Modification that led here from the discovering node,
                  ``None`` for the start node and undiscovered nodes.
        backedge: Arena index of the discovering node, ``None`` for the
                  start node and undiscovered nodes.
        visited:  Set once the node is discovered; never cleared.
    """
    word: str
    edit: Optional[EditDescriptor] = None
    backedge: Optional[int] = None
    visited: bool = False

    def discover(self, parent: int, edit: EditDescriptor) -> None:
        """Mark the node visited and record the edge it was reached by."""
        if self.visited:
            raise ValueError(f"Node '{self.word}' already visited")
        self.visited = True
        self.backedge = parent
        self.edit = edit

    def __repr__(self) -> str:
        state = "visited" if self.visited else "unvisited"
        return f"SearchNode({self.word}, {state}, backedge={self.backedge})"
