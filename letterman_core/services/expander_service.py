# letterman_core/services/expander_service.py
"""
    DictionaryExpander — turns raw dictionary entries into candidate words.

    Complex entries may carry one annotation:

        abc&     → abc, cba          (reversal)
        c[ab]t   → cat, cbt          (one word per bracketed letter)
        ab!      → ab, ba            (swap the two letters before '!')
        a?       → a, aa             (double the letter before '?')

    The entry is scanned left to right and the first annotation
    character found is the only one honoured.  Annotation characters
    that follow it stay in the produced words as plain letters.
"""
import logging
from typing import Callable, Dict, Iterable, Iterator, List

from letterman_api.exceptions import MalformedEntryError
from letterman_api.types import ExpansionMode

logger = logging.getLogger(__name__)


class DictionaryExpander:
    """
    Expands a single trimmed dictionary token according to the
    dictionary mode.

    Usage:
        expander = DictionaryExpander()
        expander.expand("c[ao]t", ExpansionMode.COMPLEX)   # ['cat', 'cot']
    """

    def __init__(self, comment_marker: str = "//"):
        self._comment_marker = comment_marker
        self._handlers: Dict[str, Callable[[str, int], List[str]]] = {
            '&': self._reverse,
            '[': self._fan_out,
            '!': self._transpose,
            '?': self._duplicate,
        }

    # ── Public API ───────────────────────────────────────────────

    def is_comment(self, token: str) -> bool:
        return token.startswith(self._comment_marker)

    def expand(self, token: str, mode: ExpansionMode) -> List[str]:
        """
        Expand one token.

        :param token: Dictionary token, already stripped of whitespace
        :param mode: Simple (verbatim) or complex (annotated) dictionary
        :return: Words in emission order; empty for comments
        :raises MalformedEntryError: If an annotation cannot be applied
        """
        if not token or self.is_comment(token):
            return []
        if mode is ExpansionMode.SIMPLE:
            return [token]
        return self._expand_annotated(token)

    def expand_all(self, tokens: Iterable[str], mode: ExpansionMode) -> Iterator[str]:
        """Expand a sequence of tokens, preserving order."""
        for token in tokens:
            yield from self.expand(token, mode)

    # ── Annotation scanner ───────────────────────────────────────

    def _expand_annotated(self, token: str) -> List[str]:
        for index, char in enumerate(token):
            handler = self._handlers.get(char)
            if handler is not None:
                return handler(token, index)
        return [token]

    # ── Annotation handlers ──────────────────────────────────────

    @staticmethod
    def _reverse(token: str, index: int) -> List[str]:
        word = token[:index]
        return [word, word[::-1]]

    @staticmethod
    def _fan_out(token: str, index: int) -> List[str]:
        close = token.find(']', index + 1)
        if close == -1:
            raise MalformedEntryError(token, "missing ']'")

        prefix = token[:index]
        letters = token[index + 1:close]
        suffix = token[close + 1:]
        if not letters:
            logger.warning("Entry '%s' has an empty letter set; no words produced.", token)
        return [prefix + letter + suffix for letter in letters]

    @staticmethod
    def _transpose(token: str, index: int) -> List[str]:
        if index < 2:
            raise MalformedEntryError(token, "'!' needs two letters before it")

        word = token[:index] + token[index + 1:]
        swapped = word[:index - 2] + word[index - 1] + word[index - 2] + word[index:]
        return [word, swapped]

    @staticmethod
    def _duplicate(token: str, index: int) -> List[str]:
        if index == 0:
            raise MalformedEntryError(token, "'?' needs a letter before it")

        word = token[:index] + token[index + 1:]
        doubled = word[:index] + word[index - 1] + word[index:]
        return [word, doubled]
