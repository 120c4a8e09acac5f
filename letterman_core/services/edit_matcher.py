# letterman_core/services/edit_matcher.py
"""
    EditMatcher — decides whether two words are one permitted edit apart.

    This is the edge oracle of the implicit word graph: two candidate
    words are adjacent exactly when ``match`` returns a descriptor.
"""
from typing import Optional

from letterman_api.models.edit import Delete, EditDescriptor, Insert, Substitute, Swap
from letterman_core.morph_platform.config import Capabilities


def same_except_at(a: str, b: str, loc: int) -> bool:
    """True if equal-length ``a`` and ``b`` agree everywhere but ``loc``."""
    return a[:loc] == b[:loc] and a[loc + 1:] == b[loc + 1:]


def same_swapped_at(a: str, b: str, loc: int) -> bool:
    """True if swapping ``a[loc]`` and ``a[loc + 1]`` turns ``a`` into ``b``."""
    return (a[loc] == b[loc + 1] and a[loc + 1] == b[loc]
            and a[:loc] == b[:loc] and a[loc + 2:] == b[loc + 2:])


class EditMatcher:
    """
    Finds the single modification turning ``current`` into ``desired``.

    Substitution is tried before swap at every index, and the lowest
    index wins.  Insert and delete positions are the first point where
    the two words diverge.
    """

    def __init__(self, capabilities: Capabilities):
        self._capabilities = capabilities

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def match(self, current: str, desired: str) -> Optional[EditDescriptor]:
        """
        :param current: Word the edit starts from
        :param desired: Word the edit must produce
        :return: The edit, or None if the words are not one permitted edit apart
        """
        if current == desired:
            return None

        caps = self._capabilities
        if len(current) == len(desired):
            return self._match_same_length(current, desired)

        if not caps.length_change:
            return None
        if len(current) == len(desired) + 1:
            return self._match_delete(current, desired)
        if len(current) + 1 == len(desired):
            return self._match_insert(current, desired)
        return None

    def _match_same_length(self, current: str, desired: str) -> Optional[EditDescriptor]:
        caps = self._capabilities
        last = len(current) - 1
        for i in range(len(current)):
            if caps.substitute and same_except_at(current, desired, i):
                return Substitute(i, desired[i])
            if caps.swap and i != last and same_swapped_at(current, desired, i):
                return Swap(i)
        return None

    @staticmethod
    def _match_delete(current: str, desired: str) -> Optional[Delete]:
        cur_i = 0
        des_i = 0
        diff_loc = None

        while des_i < len(desired):
            if current[cur_i] == desired[des_i]:
                cur_i += 1
                des_i += 1
            else:
                if diff_loc is not None:
                    return None
                diff_loc = cur_i
                cur_i += 1

        if diff_loc is None:
            return Delete(len(desired))
        return Delete(diff_loc)

    @staticmethod
    def _match_insert(current: str, desired: str) -> Optional[Insert]:
        cur_i = 0
        des_i = 0
        diff_loc = None

        while cur_i < len(current):
            if current[cur_i] == desired[des_i]:
                cur_i += 1
                des_i += 1
            else:
                if diff_loc is not None:
                    return None
                diff_loc = cur_i
                des_i += 1

        if diff_loc is None:
            return Insert(len(current), desired[len(current)])
        return Insert(diff_loc, desired[diff_loc])


def match(current: str, desired: str, capabilities: Capabilities) -> Optional[EditDescriptor]:
    """Module-level shortcut for a one-off comparison."""
    return EditMatcher(capabilities).match(current, desired)
