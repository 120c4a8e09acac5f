"""
Morph Platform — configuration, plugin discovery and the platform facade.

Public API:
    MorphPlatform   – central orchestrator (Facade / Singleton)
    Capabilities    – enabled modification kinds
    MorphConfig     – configuration of one search
    PlatformConfig  – top-level configuration
    DictionarySourceLoader – dictionary source discovery
"""
from .core import MorphPlatform
from .config import Capabilities, MorphConfig, PlatformConfig
from .plugin_loader import DictionarySourceLoader

__all__ = [
    'MorphPlatform',
    'Capabilities',
    'MorphConfig',
    'PlatformConfig',
    'DictionarySourceLoader',
]
