import io
from pathlib import Path

import pytest

from letterman_api.exceptions import DictionaryFormatError, MalformedEntryError
from dictionary_source_plugin_xml.plugin import XmlDictionarySourcePlugin

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def plugin():
    return XmlDictionarySourcePlugin()


def _parse(plugin, text):
    return plugin.parse(io.StringIO(text))


def test_plugin_name(plugin):
    assert plugin.get_plugin_name() == "XML Dictionary"


def test_complex_dictionary_file(plugin):
    words = plugin.parse_file(str(FIXTURES_DIR / "complex_dictionary.xml"))
    assert words == ["cat", "cot", "cog", "dog", "god", "ab", "ba", "a", "aa"]


def test_same_words_from_stream(plugin):
    text = (FIXTURES_DIR / "complex_dictionary.xml").read_text(encoding="utf-8")
    assert _parse(plugin, text) == ["cat", "cot", "cog", "dog", "god", "ab", "ba", "a", "aa"]


def test_simple_mode(plugin):
    text = '<dictionary mode="S"><word>ab!</word><word>cat</word></dictionary>'
    assert _parse(plugin, text) == ["ab!", "cat"]


def test_namespaced_document(plugin):
    text = ('<d:dictionary xmlns:d="urn:letterman" mode="S">'
            '<d:word>cat</d:word><d:word>dog</d:word></d:dictionary>')
    assert _parse(plugin, text) == ["cat", "dog"]


@pytest.mark.parametrize("text", [
    '<dictionary><word>cat</word></dictionary>',
    '<dictionary mode="X"><word>cat</word></dictionary>',
    '<words mode="S"><word>cat</word></words>',
    '<dictionary mode="S"><word>cat</word>',
    'not xml at all',
])
def test_invalid_documents(plugin, text):
    with pytest.raises(DictionaryFormatError, match="Invalid dictionary"):
        _parse(plugin, text)


def test_malformed_entry(plugin):
    with pytest.raises(MalformedEntryError):
        _parse(plugin, '<dictionary mode="C"><word>!ab</word></dictionary>')
