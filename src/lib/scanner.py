"""
Scanner for // @cttt.kind(argument) directive comments

Walks source text line by line and turns every directive comment into a
Directive record, preserving input order.

A directive line consists of, in order:
1. Optional leading whitespace
2. A comment opener (//, #, /*, *, --, <!--, ...)
3. Optional whitespace
4. The namespace @cttt (any letter case), a dot and the kind
5. (argument) with optional whitespace inside the parentheses
6. Optional whitespace, an optional comment closer (*/, -->, ...), end of line

No whitespace is allowed inside "@cttt.kind(". Kinds are ASCII: letters,
digits, underscores and hyphens, not starting with a hyphen. Closers are not
paired with openers; any closer is accepted after any opener, so
"// @cttt.name(a) */" is a directive.

Trailing whitespace is removed before matching, leaving a single whitespace
run in the pattern tail so long lines match in linear time.

The scanner is permissive: lines that look like directives but do not fit
the shape above (unclosed parenthesis, empty argument, directive text inside
a string literal, trailing code) are skipped, never raised.

Example:
    >>> scanner = Scanner("// @cttt.name(foo)\\nlet x = 1;\\n// @cttt.change(bar)")
    >>> [(d.kind, d.argument, d.line) for d in scanner.scan()]
    [('name', 'foo', 1), ('change', 'bar', 3)]
"""

import re
from typing import Iterator, List, Optional, Tuple

from ..models.directive import (
    NAMESPACE,
    COMMENT_OPENERS,
    COMMENT_CLOSERS,
    Directive,
    args_split,
)
from .log import LOG


def alternation_make(tokens: Tuple[str, ...]) -> str:
    """Regex alternation of literal tokens, longest first"""
    return "|".join(re.escape(token) for token in sorted(tokens, key=len, reverse=True))


DIRECTIVE_PATTERN = re.compile(
    r"^\s*(?:" + alternation_make(COMMENT_OPENERS) + r")\s*"
    r"(?P<namespace>(?i:" + re.escape(NAMESPACE) + r"))\."
    r"(?P<kind>[A-Za-z0-9_][A-Za-z0-9_-]*)"
    r"\((?P<argument>[^()]*)\)"
    r"\s*(?:" + alternation_make(COMMENT_CLOSERS) + r")?$"
)

NAMESPACE_PROBE = re.compile(re.escape(NAMESPACE) + r"\.", re.IGNORECASE)


class Scanner:
    """
    Line scanner producing Directive records

    Each instance scans one source text; nothing is shared between
    instances, so independent calls need no coordination.
    """

    def __init__(self, source: str):
        """
        Args:
            source: Text to scan. Lines are split on '\\n'; a trailing
                    '\\r' on each line is dropped.
        """
        self.source = source

    def lines_iter(self) -> Iterator[Tuple[int, str]]:
        """Yield (1-based line number, line) with carriage returns removed"""
        for index, line in enumerate(self.source.split("\n"), start=1):
            if line.endswith("\r"):
                line = line[:-1]
            yield index, line

    def line_match(self, line: str, line_number: int) -> Optional[Directive]:
        """
        Match a single line against the directive pattern

        Args:
            line: One physical line, without line terminator
            line_number: Its 1-based position in the source

        Returns:
            Directive if the line is a well-formed directive comment,
            None otherwise
        """
        line = line.rstrip()
        match = DIRECTIVE_PATTERN.match(line)
        if not match:
            if NAMESPACE_PROBE.search(line):
                LOG(f"Skipping line {line_number}: not a directive comment: {line.strip()}", level=3)
            return None

        argument = match.group("argument").strip()
        args = args_split(argument)
        if not args:
            LOG(f"Skipping line {line_number}: empty directive argument", level=3)
            return None

        return Directive(
            kind=match.group("kind"),
            argument=argument,
            line=line_number,
            column=match.start("namespace") + 1,
            args=args,
            comment=line,
        )

    def directives_iter(self) -> Iterator[Directive]:
        """Yield directives lazily in input order"""
        for line_number, line in self.lines_iter():
            directive = self.line_match(line, line_number)
            if directive is not None:
                yield directive

    def scan(self) -> List[Directive]:
        """
        Scan the whole source

        Returns:
            All directives in input order; empty list if there are none
        """
        return list(self.directives_iter())
