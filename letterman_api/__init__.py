"""
Letterman API — models, errors and plugin contracts.
"""
from .types import SearchMode, OutputFormat, EditKind, ExpansionMode
from .models.edit import EditDescriptor, Substitute, Delete, Insert, Swap
from .models.node import SearchNode
from .models.arena import NodeArena
from .plugins.base import DictionarySourcePlugin
from .exceptions import (
    LettermanError,
    ConfigurationError,
    DictionaryFormatError,
    MalformedEntryError,
    DuplicateTerminalError,
    MissingTerminalError,
)

__all__ = [
    'SearchMode',
    'OutputFormat',
    'EditKind',
    'ExpansionMode',
    'EditDescriptor',
    'Substitute',
    'Delete',
    'Insert',
    'Swap',
    'SearchNode',
    'NodeArena',
    'DictionarySourcePlugin',
    'LettermanError',
    'ConfigurationError',
    'DictionaryFormatError',
    'MalformedEntryError',
    'DuplicateTerminalError',
    'MissingTerminalError',
]
