"""
    Command-line flags → ``MorphConfig``.

    Short flags may be combined (``-qc``, ``-bcat``) and long options
    take their value either separately or after ``=`` (``--output=M``).
"""
import argparse
from typing import List, Optional

from letterman_api.exceptions import ConfigurationError
from letterman_api.types import OutputFormat, SearchMode

from ..config import Capabilities, MorphConfig

DESCRIPTION = (
    "This program calculates a path from a starting word to an ending word "
    "using specified modification abilities. The dictionary is read from "
    "standard input unless --dictionary is given."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="letterman", description=DESCRIPTION)

    parser.add_argument("-q", "--queue", dest="modes", action="append_const",
                        const=SearchMode.QUEUE, help="Use breadth first search")
    parser.add_argument("-s", "--stack", dest="modes", action="append_const",
                        const=SearchMode.STACK, help="Use depth first search")
    parser.add_argument("-b", "--begin", metavar="WORD", help="Specify begin word")
    parser.add_argument("-e", "--end", metavar="WORD", help="Specify end word")
    parser.add_argument("-o", "--output", metavar="FORMAT", default=OutputFormat.WORD.value,
                        help="Specify either word format (W), or mod format (M)")
    parser.add_argument("-c", "--change", action="store_true",
                        help="Allow letterman to change one letter")
    parser.add_argument("-l", "--length", action="store_true",
                        help="Allow letterman to insert or delete a letter")
    parser.add_argument("-p", "--swap", action="store_true",
                        help="Allow letterman to swap any two adjacent letters")
    parser.add_argument("-d", "--dictionary", metavar="PATH",
                        help="Read the dictionary from PATH instead of standard input")
    parser.add_argument("-f", "--dictionary-format", metavar="NAME", default=None,
                        help="Dictionary source plugin to use (default: text)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log search progress to standard error")
    return parser


def build_config(args: argparse.Namespace) -> MorphConfig:
    """
    Turn parsed flags into a validated ``MorphConfig``.

    Raises:
        ConfigurationError: With the first violated rule.
    """
    try:
        output_format = OutputFormat.from_flag(args.output)
    except ValueError:
        raise ConfigurationError("Invalid output mode specified")

    modes: List[SearchMode] = args.modes or []
    if len(modes) > 1:
        raise ConfigurationError("Conflicting or duplicate stack and queue specified")
    if not modes:
        raise ConfigurationError("Must specify one of stack or queue")

    config = MorphConfig(
        begin=args.begin or "",
        end=args.end or "",
        mode=modes[0],
        output_format=output_format,
        capabilities=Capabilities(
            substitute=args.change,
            length_change=args.length,
            swap=args.swap,
        ),
    )
    config.validate()
    return config


def parse_config(argv: Optional[List[str]] = None) -> MorphConfig:
    """Parse ``argv`` and build the configuration in one step."""
    return build_config(build_parser().parse_args(argv))
