"""
Plugin contracts — abstract base classes for dictionary source plugins.
"""
from .base import DictionarySourcePlugin

__all__ = ['DictionarySourcePlugin']
