"""
Public parse entry points

parse() returns every directive found; parse_strict() additionally checks
each directive kind against a caller-supplied allow-list.
"""

from typing import Iterable, List

from ..models.directive import Directive
from ..models.errors import DisallowedDirectiveKind
from .scanner import Scanner
from .log import LOG


def parse(text: str) -> List[Directive]:
    """
    Extract all directives from text

    Never fails. Any kind string is accepted.

    Args:
        text: Source text (any line-ending convention)

    Returns:
        Directives in input order; empty list if there are none
    """
    directives = Scanner(text).scan()
    LOG(f"Found {len(directives)} directives", level=2)
    return directives


def violations_find(directives: Iterable[Directive], allowed_kinds: Iterable[str]) -> List[Directive]:
    """
    Collect every directive whose kind is not in allowed_kinds

    Args:
        directives: Directives to check
        allowed_kinds: Permitted kind strings (exact match)

    Returns:
        Offending directives in input order
    """
    allowed = frozenset(allowed_kinds)
    return [directive for directive in directives if directive.kind not in allowed]


def parse_strict(text: str, allowed_kinds: Iterable[str]) -> List[Directive]:
    """
    Extract directives, failing on any kind outside allowed_kinds

    Args:
        text: Source text
        allowed_kinds: Permitted kind strings. An empty collection rejects
                       every directive.

    Returns:
        The same list parse(text) would return

    Raises:
        DisallowedDirectiveKind: For the first directive (in input order)
                                 whose kind is not allowed

    Example:
        >>> parse_strict("// @cttt.change(bar)", {"name"})
        Traceback (most recent call last):
        ...
        DisallowedDirectiveKind: Disallowed directive kind 'change' at line 1, column 4: // @cttt.change(bar)
    """
    allowed = frozenset(allowed_kinds)
    directives = parse(text)

    for directive in directives:
        if directive.kind not in allowed:
            raise DisallowedDirectiveKind(directive)

    return directives
