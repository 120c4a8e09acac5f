import io
from pathlib import Path

import pytest

from letterman_api.exceptions import DictionaryFormatError, MalformedEntryError
from dictionary_source_plugin_text.plugin import TextDictionarySourcePlugin

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def plugin():
    return TextDictionarySourcePlugin()


def _parse(plugin, text):
    return plugin.parse(io.StringIO(text))


def test_plugin_name(plugin):
    assert plugin.get_plugin_name() == "Text Dictionary"


def test_simple_dictionary_file(plugin):
    words = plugin.parse_file(str(FIXTURES_DIR / "simple_dictionary.txt"))
    assert words == ["cat", "cot", "cog", "dog"]


def test_complex_dictionary_file(plugin):
    words = plugin.parse_file(str(FIXTURES_DIR / "complex_dictionary.txt"))
    assert words == ["cat", "cot", "cog", "dog", "god", "ab", "ba", "a", "aa"]


def test_simple_mode_keeps_annotations(plugin):
    assert _parse(plugin, "S\n2\nab!\nc[ao]t\n") == ["ab!", "c[ao]t"]


def test_comments_skipped_in_simple_mode(plugin):
    assert _parse(plugin, "S\n2\n//cat\ndog\n") == ["dog"]


def test_only_first_token_of_a_line(plugin):
    assert _parse(plugin, "S\n2\ncat dog\n  cot\tcog\n") == ["cat", "cot"]


def test_blank_lines_ignored(plugin):
    assert _parse(plugin, "S\n2\n\ncat\n\n\ndog\n") == ["cat", "dog"]


def test_count_hint_is_not_binding(plugin):
    assert _parse(plugin, "S\n1\ncat\ncot\ndog\n") == ["cat", "cot", "dog"]
    assert _parse(plugin, "S\n10\ncat\n") == ["cat"]


def test_count_hint_may_follow_blank_lines(plugin):
    assert _parse(plugin, "S\n\n3 words follow\ncat\n") == ["cat"]


def test_marker_surrounding_whitespace(plugin):
    assert _parse(plugin, "C \r\n1\r\nab!\r\n") == ["ab", "ba"]


def test_empty_body(plugin):
    assert _parse(plugin, "S\n0\n") == []


def test_duplicates_are_kept(plugin):
    assert _parse(plugin, "S\n3\ncat\ncat\ndog\n") == ["cat", "cat", "dog"]


@pytest.mark.parametrize("text", [
    "",
    "X\n1\ncat\n",
    "s\n1\ncat\n",
    "S\ncat\n",
    "S\n-1\ncat\n",
    "S\n",
])
def test_invalid_header(plugin, text):
    with pytest.raises(DictionaryFormatError, match="Invalid dictionary"):
        _parse(plugin, text)


def test_malformed_entry(plugin):
    with pytest.raises(MalformedEntryError) as exc_info:
        _parse(plugin, "C\n2\ncat\nc[ao\n")
    assert exc_info.value.entry == "c[ao"
