# letterman_core/services/search_service.py
"""
    Morph search — explores the implicit word graph from the begin word.

    Design Pattern: Template Method
    ─────────────────────────────────
    ``MorphSearchService.search`` owns the traversal skeleton
    (seed → take → scan candidates → discover), and the concrete
    subclasses only decide which node of the work collection is taken
    next: the oldest (queue, breadth first) or the newest (stack,
    depth first).

    Edges are never stored.  Whether two words are adjacent is asked
    of the ``EditMatcher`` every time a node is expanded, and the
    candidates are always scanned in arena order, so a search is fully
    determined by the candidate order and the configuration.
"""
import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence, Type

from letterman_api.models.arena import NodeArena
from letterman_api.models.node import SearchNode
from letterman_api.types import SearchMode
from letterman_core.morph_platform.config import MorphConfig
from .edit_matcher import EditMatcher

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of one search.

    Attributes:
        arena:      The arena the search ran on, with its discovery record.
        discovered: Number of visited words, the begin word included.
        end_index:  Arena index of the end node if it was reached.
    """
    arena: NodeArena
    discovered: int
    end_index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.end_index is not None

    def chain(self) -> List[SearchNode]:
        """Nodes of the morph from begin to end; empty when not found."""
        if self.end_index is None:
            return []
        return [self.arena[i] for i in self.arena.chain(self.end_index)]


class MorphSearchService(ABC):
    """
    Abstract base for the morph searches.

    Concrete subclasses must implement:
        - _take(frontier) → arena index of the next node to expand
    """

    mode: SearchMode

    def execute(self, words: Sequence[str], config: MorphConfig) -> SearchResult:
        """
        Build a fresh arena over ``words`` and search it.

        Raises:
            DuplicateTerminalError: If begin or end occurs twice in ``words``.
            MissingTerminalError:   If begin does not occur in ``words``.
        """
        arena = NodeArena(words, config.begin, config.end)
        return self.search(arena, EditMatcher(config.capabilities))

    def search(self, arena: NodeArena, matcher: EditMatcher) -> SearchResult:
        """Run the traversal on an arena whose begin node is already visited."""
        begin = arena.begin_index
        logger.info("Starting %s search from '%s' over %d words.",
                    self.mode.value, arena.begin.word, len(arena))

        allow_length_change = matcher.capabilities.length_change
        frontier: Deque[int] = deque([begin])
        discovered = 1

        while frontier:
            current = self._take(frontier)
            current_word = arena[current].word

            for index in arena.candidates(current, allow_length_change):
                node = arena[index]
                edit = matcher.match(current_word, node.word)
                if edit is None:
                    continue

                node.discover(current, edit)
                frontier.append(index)
                discovered += 1
                logger.debug("Discovered '%s' from '%s' via %s",
                             node.word, current_word, edit.to_line())

                if index == arena.end_index:
                    logger.info("Reached '%s' after discovering %d words.",
                                node.word, discovered)
                    return SearchResult(arena, discovered, index)

        logger.info("Search exhausted after discovering %d words.", discovered)
        return SearchResult(arena, discovered)

    @abstractmethod
    def _take(self, frontier: Deque[int]) -> int:
        """Remove and return the next node to expand."""
        ...


class QueueSearchService(MorphSearchService):
    """Breadth first: the returned morph has the fewest possible edits."""

    mode = SearchMode.QUEUE

    def _take(self, frontier: Deque[int]) -> int:
        return frontier.popleft()


class StackSearchService(MorphSearchService):
    """Depth first: returns some valid morph, not necessarily a short one."""

    mode = SearchMode.STACK

    def _take(self, frontier: Deque[int]) -> int:
        return frontier.pop()


_SERVICES = {
    SearchMode.QUEUE: QueueSearchService,
    SearchMode.STACK: StackSearchService,
}


def create_search_service(mode: SearchMode) -> MorphSearchService:
    """Factory: search service for the given work-collection mode."""
    service_cls: Type[MorphSearchService] = _SERVICES[mode]
    return service_cls()
