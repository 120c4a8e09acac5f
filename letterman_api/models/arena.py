"""
    NodeArena - fixed-size storage for the nodes of one search.

    The arena is built once from the candidate word list and never
    resized.  Nodes refer to each other by arena index only.
"""
import heapq
from typing import Dict, Iterator, List, Optional, Sequence

from ..exceptions import DuplicateTerminalError, MissingTerminalError
from .node import SearchNode


class NodeArena:
    """
        Holds one ``SearchNode`` per candidate word, in candidate order.
        The begin node starts out visited.
    """

    def __init__(self, words: Sequence[str], begin: str, end: str):
        """
        Build the arena and locate the terminal nodes.

        Args:
            words: Candidate word list (not copied).
            begin: Start word; must occur exactly once.
            end:   End word; must occur at most once.  An end word equal
                   to ``begin`` is never located, since the start node
                   cannot be discovered.

        Raises:
            DuplicateTerminalError: If begin or end occurs more than once.
            MissingTerminalError:   If begin does not occur at all.
        """
        self._nodes: List[SearchNode] = [SearchNode(word) for word in words]
        self._by_length: Dict[int, List[int]] = {}
        self.begin_index: Optional[int] = None
        self.end_index: Optional[int] = None

        for index, node in enumerate(self._nodes):
            self._by_length.setdefault(len(node.word), []).append(index)
            if node.word == begin:
                if self.begin_index is not None:
                    raise DuplicateTerminalError(begin, "begin")
                self.begin_index = index
                node.visited = True
            elif node.word == end:
                if self.end_index is not None:
                    raise DuplicateTerminalError(end, "end")
                self.end_index = index

        if self.begin_index is None:
            raise MissingTerminalError(begin, "begin")

    @property
    def begin(self) -> SearchNode:
        return self._nodes[self.begin_index]

    @property
    def end(self) -> Optional[SearchNode]:
        if self.end_index is None:
            return None
        return self._nodes[self.end_index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)

    def visited_count(self) -> int:
        return sum(1 for node in self._nodes if node.visited)

    def candidates(self, index: int, allow_length_change: bool) -> Iterator[int]:
        """
        Yield indices of unvisited nodes that could be one edit away from
        node ``index``, in arena order.

        Only words of the same length (or within one letter of it when
        length changes are allowed) are considered.  The visited flag is
        checked lazily, so nodes discovered while the caller consumes the
        iterator are skipped like they would be in a plain arena scan.
        """
        length = len(self._nodes[index].word)
        lengths = [length - 1, length, length + 1] if allow_length_change else [length]
        buckets = [self._by_length[n] for n in lengths if n in self._by_length]

        for other in heapq.merge(*buckets):
            if other == index or self._nodes[other].visited:
                continue
            yield other

    def chain(self, index: int) -> List[int]:
        """
        Follow back-edges from ``index`` to the begin node.

        Returns:
            Arena indices from the begin node to ``index`` inclusive.
        """
        indices = []
        current: Optional[int] = index
        while current is not None:
            indices.append(current)
            if len(indices) > len(self._nodes):
                raise RuntimeError("Back-edges form a cycle")
            current = self._nodes[current].backedge
        indices.reverse()
        return indices

    def __repr__(self) -> str:
        return (f"NodeArena(nodes={len(self._nodes)}, begin={self.begin_index}, "
                f"end={self.end_index})")
