"""
cttt - Change-this-then-that directive parser

Extracts // @cttt.kind(argument) annotations from source-code comments and
returns them as an ordered list of Directive records.
"""

__version__ = "0.1.0"
__author__ = "Justin Poehnelt"
__email__ = "justin.poehnelt@gmail.com"

from .lib import Scanner, parse, parse_strict, violations_find, LOG, state_connectToLogger
from .models import Directive, DisallowedDirectiveKind, NAMESPACE

__all__ = [
    "Scanner",
    "parse",
    "parse_strict",
    "violations_find",
    "Directive",
    "DisallowedDirectiveKind",
    "NAMESPACE",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
