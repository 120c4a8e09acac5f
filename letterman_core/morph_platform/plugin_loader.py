"""
    Dictionary source discovery via entry_points.

    Design Pattern: Registry
    ────────────────────────
    Dictionary readers are installed as distributions that register a
    ``DictionarySourcePlugin`` subclass under the
    ``letterman.dictionary_source`` entry-point group (see setup.py).
    The registry is filled the first time a reader is asked for.
"""
import importlib.metadata
import logging
from typing import Dict, List, Optional

from letterman_api.plugins.base import DictionarySourcePlugin

logger = logging.getLogger(__name__)

# Entry-point group name (must match setup.py)
DICTIONARY_SOURCE_EP_GROUP = 'letterman.dictionary_source'


class DictionarySourceLoader:
    """
    Registry of installed dictionary readers, keyed by entry-point name.

    Usage:
        loader = DictionarySourceLoader()
        reader = loader.get('text')          # Optional[DictionarySourcePlugin]
        words = reader.parse(sys.stdin)
    """

    def __init__(self, group: str = DICTIONARY_SOURCE_EP_GROUP):
        self._group = group
        self._sources: Optional[Dict[str, DictionarySourcePlugin]] = None

    @property
    def sources(self) -> Dict[str, DictionarySourcePlugin]:
        """Entry-point name → reader instance, discovered on first access."""
        if self._sources is None:
            self._sources = self._discover()
        return self._sources

    def get(self, name: str) -> Optional[DictionarySourcePlugin]:
        return self.sources.get(name)

    def get_names(self) -> List[str]:
        return sorted(self.sources)

    def _discover(self) -> Dict[str, DictionarySourcePlugin]:
        sources: Dict[str, DictionarySourcePlugin] = {}
        for ep in importlib.metadata.entry_points().select(group=self._group):
            try:
                reader_cls = ep.load()
            except Exception as exc:
                logger.error("Failed to load dictionary source '%s': %s", ep.name, exc)
                continue

            if not (isinstance(reader_cls, type) and issubclass(reader_cls, DictionarySourcePlugin)):
                logger.warning("Dictionary source '%s' is not a DictionarySourcePlugin; skipped.",
                               ep.name)
                continue

            reader = reader_cls()
            sources[ep.name] = reader
            logger.info("Dictionary source '%s' registered (%s).",
                        ep.name, reader.get_plugin_name())
        return sources
