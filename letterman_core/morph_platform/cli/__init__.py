"""
CLI package — command-line front end of the morph search.
"""
from .arguments import build_parser, build_config, parse_config
from .runner import main, configure_logging

__all__ = [
    'build_parser',
    'build_config',
    'parse_config',
    'main',
    'configure_logging',
]
