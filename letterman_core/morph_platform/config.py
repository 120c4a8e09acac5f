"""
    Platform configuration — search capabilities, morph settings, defaults.

    Provides typed configuration objects.  ``MorphConfig`` is the finished
    configuration the search core consumes; the CLI builds it from flags.
"""
import logging
from dataclasses import dataclass, field

from letterman_api.exceptions import ConfigurationError
from letterman_api.types import OutputFormat, SearchMode


@dataclass(frozen=True)
class Capabilities:
    """
    Modification kinds enabled for one search.

    Attributes:
        substitute:    Change one letter (``--change``).
        length_change: Insert or delete one letter (``--length``).
        swap:          Swap two adjacent letters (``--swap``).
    """
    substitute: bool = False
    length_change: bool = False
    swap: bool = False

    def any(self) -> bool:
        return self.substitute or self.length_change or self.swap


@dataclass
class MorphConfig:
    """
    Everything one search needs besides the candidate words.

    Attributes:
        begin:         Start word.
        end:           End word.
        mode:          Queue (breadth first) or stack (depth first).
        output_format: Word list or modification list.
        capabilities:  Enabled modification kinds.
    """
    begin: str
    end: str
    mode: SearchMode = SearchMode.QUEUE
    output_format: OutputFormat = OutputFormat.WORD
    capabilities: Capabilities = field(default_factory=Capabilities)

    def validate(self) -> None:
        """
        Check the flag-level invariants.

        Raises:
            ConfigurationError: With the first violated rule.
        """
        if not self.begin:
            raise ConfigurationError("Beginning word not specified")
        if not self.end:
            raise ConfigurationError("Ending word not specified")
        if len(self.begin) != len(self.end) and not self.capabilities.length_change:
            raise ConfigurationError(
                "The first and last words must have the same length when length mode is off"
            )
        if not self.capabilities.any():
            raise ConfigurationError(
                "Must specify at least one modification mode (change length swap)"
            )


@dataclass
class PlatformConfig:
    """
    Top-level configuration for the Morph Platform.

    Attributes:
        default_dictionary_source: Entry-point name of the dictionary plugin
                                   used when none is requested.
        log_format:                Format of the stderr log handler the CLI installs.
        log_level:                 Level used unless ``--verbose`` is given.
    """
    default_dictionary_source: str = "text"
    log_format: str = "[%(asctime)s] %(name)s %(levelname)s - %(message)s"
    log_level: int = logging.WARNING
