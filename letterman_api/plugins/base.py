"""
    Abstract base class for dictionary source plugins.
    Defines the "Contract" that all dictionary sources must follow.
"""
from abc import ABC, abstractmethod
from typing import List, TextIO


class DictionarySourcePlugin(ABC):
    """
        Abstract base class for Dictionary Source plugins.
        Pattern: Strategy (for dictionary loading).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the plugin.
            Example: "Text Dictionary"
        """
        pass

    @abstractmethod
    def parse(self, stream: TextIO) -> List[str]:
        """
        Main method: Reads a dictionary and returns the candidate words.

        Args:
            stream: Open text stream positioned at the start of the dictionary.

        Returns:
            List[str]: Fully expanded candidate words, in dictionary order.

        Raises:
            DictionaryFormatError: If the dictionary cannot be read.
        """
        pass

    def parse_file(self, file_path: str) -> List[str]:
        """Open ``file_path`` and parse it."""
        with open(file_path, "r", encoding="utf-8") as fh:
            return self.parse(fh)
