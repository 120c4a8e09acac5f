# letterman_core/services/formatter_service.py
"""
    PathFormatter — renders a search result as output lines.

        Words in morph: 4          Words in morph: 4
        cat                        cat
        cot                        c,1,o
        cog                        c,2,g
        dog                        c,0,d
"""
from typing import List, Sequence

from letterman_api.models.node import SearchNode
from letterman_api.types import OutputFormat
from .search_service import SearchResult


class PathFormatter:
    """Formats a found morph as words or modifications, or reports failure."""

    def __init__(self, output_format: OutputFormat = OutputFormat.WORD):
        self._output_format = output_format

    @property
    def output_format(self) -> OutputFormat:
        return self._output_format

    def format(self, result: SearchResult) -> List[str]:
        if not result.found:
            return self.format_failure(result.discovered)
        return self.format_chain(result.chain())

    def format_chain(self, chain: Sequence[SearchNode]) -> List[str]:
        """
        :param chain: Nodes from the begin word to the end word
        :return: Header line followed by one line per word or modification
        """
        lines = [f"Words in morph: {len(chain)}"]
        if self._output_format is OutputFormat.WORD:
            lines.extend(node.word for node in chain)
        else:
            lines.append(chain[0].word)
            lines.extend(node.edit.to_line() for node in chain[1:])
        return lines

    @staticmethod
    def format_failure(discovered: int) -> List[str]:
        return [f"No solution, {discovered} words discovered."]
