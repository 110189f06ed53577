"""
Models package for cttt

Contains the Directive record, the strict-mode error and pipeline state.
"""

from .directive import Directive, NAMESPACE, COMMENT_OPENERS, COMMENT_CLOSERS
from .errors import DisallowedDirectiveKind
from .state import ProgramState, pipeline

__all__ = [
    "Directive",
    "NAMESPACE",
    "COMMENT_OPENERS",
    "COMMENT_CLOSERS",
    "DisallowedDirectiveKind",
    "ProgramState",
    "pipeline",
]
