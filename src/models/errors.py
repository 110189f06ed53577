"""
Error raised by strict-mode parsing
"""

from .directive import Directive


class DisallowedDirectiveKind(ValueError):
    """
    A directive kind outside the caller's allow-list was found

    Raised by parse_strict() at the first offending directive.

    Attributes:
        directive: The offending Directive
        kind: Its kind string
        line: 1-based source line
        column: 1-based column of the namespace token
        comment: The source line containing the directive
    """

    def __init__(self, directive: Directive) -> None:
        self.directive = directive
        self.kind = directive.kind
        self.line = directive.line
        self.column = directive.column
        self.comment = directive.comment
        super().__init__(
            f"Disallowed directive kind '{self.kind}' "
            f"at line {self.line}, column {self.column}: {self.comment}"
        )
