# tests/conftest.py
"""
Shared test fixtures.
Stub dictionaries: the classic cat → dog ladder, a graph where depth
first search takes the long way round, and a mixed-edit dictionary.
"""
import importlib.metadata
from importlib.metadata import EntryPoint, EntryPoints

import pytest

from letterman_api.types import OutputFormat, SearchMode
from letterman_core.morph_platform.config import Capabilities, MorphConfig
from letterman_core.morph_platform.core import MorphPlatform
from letterman_core.morph_platform.plugin_loader import (
    DICTIONARY_SOURCE_EP_GROUP,
    DictionarySourceLoader,
)


# ── Dictionaries ─────────────────────────────────────────────────

# cat → cot → cog → dog, one substitution per step
LADDER_WORDS = ["cat", "cot", "cog", "dog"]

# aaa → aab → abb is the short way; depth first search pops "baa"
# first and walks aaa → baa → bba → bbb → abb instead.
DETOUR_WORDS = ["aaa", "aab", "baa", "bba", "bbb", "abb"]

# cat → act (swap) → fact (insert)
MIXED_WORDS = ["cat", "act", "fact"]

SUBSTITUTE_ONLY = Capabilities(substitute=True)
ALL_CAPABILITIES = Capabilities(substitute=True, length_change=True, swap=True)


def make_config(begin: str, end: str,
                capabilities: Capabilities = SUBSTITUTE_ONLY,
                mode: SearchMode = SearchMode.QUEUE,
                output_format: OutputFormat = OutputFormat.WORD) -> MorphConfig:
    return MorphConfig(begin, end, mode, output_format, capabilities)


# ── Plugin discovery ─────────────────────────────────────────────

_PLUGIN_ENTRY_POINTS = EntryPoints([
    EntryPoint(
        name="text",
        value="dictionary_source_plugin_text.plugin:TextDictionarySourcePlugin",
        group=DICTIONARY_SOURCE_EP_GROUP,
    ),
    EntryPoint(
        name="xml",
        value="dictionary_source_plugin_xml.plugin:XmlDictionarySourcePlugin",
        group=DICTIONARY_SOURCE_EP_GROUP,
    ),
])


@pytest.fixture
def installed_plugins(monkeypatch):
    """Entry-point discovery sees exactly the two bundled dictionary sources."""
    monkeypatch.setattr(importlib.metadata, "entry_points", lambda: _PLUGIN_ENTRY_POINTS)
    MorphPlatform.reset_instance()
    yield
    MorphPlatform.reset_instance()


@pytest.fixture
def platform(installed_plugins) -> MorphPlatform:
    return MorphPlatform(loader=DictionarySourceLoader())


@pytest.fixture
def ladder_words():
    return list(LADDER_WORDS)


@pytest.fixture
def detour_words():
    return list(DETOUR_WORDS)


@pytest.fixture
def mixed_words():
    return list(MIXED_WORDS)


@pytest.fixture
def config_factory():
    """``make_config(begin, end, capabilities, mode, output_format)``"""
    return make_config
