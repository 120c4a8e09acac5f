from .edit import EditDescriptor, Substitute, Delete, Insert, Swap, apply_edit
from .node import SearchNode
from .arena import NodeArena

__all__ = [
    'EditDescriptor',
    'Substitute',
    'Delete',
    'Insert',
    'Swap',
    'apply_edit',
    'SearchNode',
    'NodeArena',
]
