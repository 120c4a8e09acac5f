"""
    CLI entry point — wires flags, dictionary loading, search and output.

    Exit status: 0 on success and on "No solution", 1 on any
    configuration, dictionary or terminal-word error, 2 on unknown
    flags (reported by argparse).
"""
import logging
import sys
from typing import List, Optional, TextIO

from letterman_api.exceptions import LettermanError

from ..config import PlatformConfig
from ..core import MorphPlatform
from .arguments import build_config, build_parser

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, config: PlatformConfig, stream: TextIO) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format=config.log_format,
        datefmt='%H:%M:%S',
        stream=stream,
    )


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None,
         platform: Optional[MorphPlatform] = None) -> int:
    """
    Run one morph search from the command line.

    Args:
        argv:     Arguments without the program name (default ``sys.argv[1:]``).
        stdin:    Dictionary stream when ``--dictionary`` is not given.
        stdout:   Where the output lines go.
        stderr:   Where error messages and logs go.
        platform: Platform to use instead of the process singleton.

    Returns:
        Process exit status.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    platform_config = platform.config if platform else PlatformConfig()
    configure_logging(args.verbose, platform_config, stderr)

    try:
        morph_config = build_config(args)
        platform = platform or MorphPlatform.get_instance(platform_config)

        if args.dictionary:
            words = platform.load_dictionary_file(args.dictionary, args.dictionary_format)
        else:
            words = platform.load_dictionary(stdin, args.dictionary_format)

        lines = platform.run(words, morph_config)
    except (LettermanError, ValueError, OSError) as exc:
        logger.debug("Aborting: %r", exc)
        stderr.write(f"{exc}\n")
        return 1

    stdout.write("\n".join(lines) + "\n")
    return 0
