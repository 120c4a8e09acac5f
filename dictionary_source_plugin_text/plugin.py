import logging
from typing import Iterator, List, TextIO

from letterman_api.exceptions import DictionaryFormatError
from letterman_api.plugins import DictionarySourcePlugin
from letterman_api.types import ExpansionMode
from letterman_core.services.expander_service import DictionaryExpander

logger = logging.getLogger(__name__)


class TextDictionarySourcePlugin(DictionarySourcePlugin):
    """
    DictionarySourcePlugin for the line-oriented dictionary format:

        C           <- mode marker: S (simple) or C (complex)
        4           <- word count hint, not binding
        c[ao]t      <- one entry per line; only the first token counts
        // comment
        dog
    """

    def __init__(self):
        self._expander = DictionaryExpander()

    def get_plugin_name(self) -> str:
        return "Text Dictionary"

    def parse(self, stream: TextIO) -> List[str]:
        marker = stream.readline().strip()
        count_hint = self._read_count_hint(stream)

        try:
            mode = ExpansionMode.from_marker(marker)
        except ValueError:
            raise DictionaryFormatError("Invalid dictionary")

        words: List[str] = []
        for token in self._tokens(stream):
            words.extend(self._expander.expand(token, mode))

        logger.debug("Read %d words (count hint %d, mode %s).",
                     len(words), count_hint, mode.value)
        return words

    # ── header ───────────────────────────────────────────────────────────────

    @staticmethod
    def _read_count_hint(stream: TextIO) -> int:
        for line in iter(stream.readline, ''):
            parts = line.split()
            if not parts:
                continue
            try:
                count = int(parts[0])
            except ValueError:
                raise DictionaryFormatError("Invalid dictionary")
            if count < 0:
                raise DictionaryFormatError("Invalid dictionary")
            return count
        raise DictionaryFormatError("Invalid dictionary")

    # ── body ─────────────────────────────────────────────────────────────────

    @staticmethod
    def _tokens(stream: TextIO) -> Iterator[str]:
        """First whitespace-delimited token of every non-blank line."""
        for line in iter(stream.readline, ''):
            parts = line.split()
            if parts:
                yield parts[0]
