"""
Core services — dictionary expansion, edit matching, morph search
and result formatting.

Errors live in ``letterman_api.exceptions`` so the plugins can raise
them without importing the core; they are re-exported here.
"""
from letterman_api.exceptions import (
    LettermanError,
    ConfigurationError,
    DictionaryFormatError,
    MalformedEntryError,
    DuplicateTerminalError,
    MissingTerminalError,
)
from .expander_service import DictionaryExpander
from .edit_matcher import EditMatcher, match
from .search_service import (
    SearchResult,
    MorphSearchService,
    QueueSearchService,
    StackSearchService,
    create_search_service,
)
from .formatter_service import PathFormatter

__all__ = [
    'DictionaryExpander',
    'EditMatcher',
    'match',
    'SearchResult',
    'MorphSearchService',
    'QueueSearchService',
    'StackSearchService',
    'create_search_service',
    'PathFormatter',
    'LettermanError',
    'ConfigurationError',
    'DictionaryFormatError',
    'MalformedEntryError',
    'DuplicateTerminalError',
    'MissingTerminalError',
]
