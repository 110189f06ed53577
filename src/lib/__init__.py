"""
cttt - Change-this-then-that directive parser

Extracts // @cttt.kind(argument) annotations from source-code comments.
"""

__version__ = "0.1.0"
__author__ = "Justin Poehnelt"
__email__ = "justin.poehnelt@gmail.com"

from .scanner import Scanner
from .resolver import parse, parse_strict, violations_find
from .log import LOG, state_connectToLogger

__all__ = [
    "Scanner",
    "parse",
    "parse_strict",
    "violations_find",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
