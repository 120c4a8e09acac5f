"""
    MorphPlatform — the central orchestrator of the application.

    Design Patterns applied
    ───────────────────────
    • Singleton   – one platform instance per process
                    (via ``MorphPlatform.get_instance()``).
    • Strategy    – pluggable dictionary sources and search modes.
    • Facade      – single entry-point for the CLI; hides plugin loading,
                    terminal-word checks, search dispatch and formatting.
"""
import logging
from typing import List, Optional, Sequence, TextIO

from letterman_api.exceptions import MissingTerminalError
from letterman_api.plugins.base import DictionarySourcePlugin

from .config import MorphConfig, PlatformConfig
from .plugin_loader import DictionarySourceLoader

logger = logging.getLogger(__name__)


class MorphPlatform:
    """
    Central orchestrator — Facade for the entire platform.

    Manages:
        • Dictionary source plugin discovery.
        • Dictionary loading.
        • Morph search and output formatting.
    """

    _instance: Optional['MorphPlatform'] = None

    # ── Singleton ────────────────────────────────────────────────

    @classmethod
    def get_instance(cls, config: Optional[PlatformConfig] = None) -> 'MorphPlatform':
        """
        Return the singleton platform instance, creating it on first call.

        Args:
            config: Optional custom config (only used on first call).
        """
        if cls._instance is None:
            cls._instance = cls(config or PlatformConfig())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Destroy the singleton (useful for testing)."""
        cls._instance = None

    # ── Constructor ──────────────────────────────────────────────

    def __init__(self, config: Optional[PlatformConfig] = None,
                 loader: Optional[DictionarySourceLoader] = None):
        """
        Initialize the platform.  Prefer ``get_instance()`` for singleton access.

        Args:
            config: Platform configuration.
            loader: Plugin loader to use instead of entry-point discovery.
        """
        self._config: PlatformConfig = config or PlatformConfig()
        self._ds_loader: DictionarySourceLoader = loader or DictionarySourceLoader()
        logger.info("MorphPlatform initialized.")

    @property
    def config(self) -> PlatformConfig:
        return self._config

    # ── Plugin discovery ─────────────────────────────────────────

    def get_dictionary_source_names(self) -> List[str]:
        return self._ds_loader.get_names()

    def get_dictionary_source(self, name: Optional[str] = None) -> DictionarySourcePlugin:
        """
        Get a dictionary-source plugin by name (default from the config).

        Raises:
            ValueError: If the plugin is not found.
        """
        name = name or self._config.default_dictionary_source
        plugin = self._ds_loader.get(name)
        if plugin is None:
            raise ValueError(
                f"Dictionary source plugin '{name}' not found. "
                f"Available: {self.get_dictionary_source_names()}"
            )
        return plugin

    # ── Dictionary loading ───────────────────────────────────────

    def load_dictionary(self, stream: TextIO, plugin_name: Optional[str] = None) -> List[str]:
        """Read candidate words from an open stream."""
        plugin = self.get_dictionary_source(plugin_name)
        words = plugin.parse(stream)
        logger.info("Dictionary loaded via '%s': %d words.",
                    plugin.get_plugin_name(), len(words))
        return words

    def load_dictionary_file(self, file_path: str,
                             plugin_name: Optional[str] = None) -> List[str]:
        """Read candidate words from a file."""
        plugin = self.get_dictionary_source(plugin_name)
        words = plugin.parse_file(file_path)
        logger.info("Dictionary loaded via '%s' from '%s': %d words.",
                    plugin.get_plugin_name(), file_path, len(words))
        return words

    # ── Search ───────────────────────────────────────────────────

    def search(self, words: Sequence[str], morph_config: MorphConfig):
        """
        Check that both terminal words exist, then run the configured search.

        Returns:
            SearchResult of the search.

        Raises:
            MissingTerminalError:   If begin or end is not among ``words``.
            DuplicateTerminalError: If begin or end occurs more than once.
        """
        from letterman_core.services.search_service import create_search_service

        if morph_config.begin not in words:
            raise MissingTerminalError(morph_config.begin, "begin")
        if morph_config.end not in words:
            raise MissingTerminalError(morph_config.end, "end")

        service = create_search_service(morph_config.mode)
        return service.execute(words, morph_config)

    def run(self, words: Sequence[str], morph_config: MorphConfig) -> List[str]:
        """Search and format in one step; returns the output lines."""
        from letterman_core.services.formatter_service import PathFormatter

        result = self.search(words, morph_config)
        return PathFormatter(morph_config.output_format).format(result)

    def __repr__(self) -> str:
        return f"MorphPlatform(sources={self._ds_loader.get_names()})"
