"""
Custom Pygments lexer for cttt directive comments

Provides syntax highlighting for // @cttt.kind(argument) lines when the
command-line tool shows the directives it found.

Token types:
- Comment: Comment openers/closers and surrounding comment text
- Name.Decorator: The @cttt namespace
- Keyword.Declaration: name / change kinds
- Name.Function: Any other kind
- String: Argument items
- Punctuation: Dot, parentheses, commas
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Comment,
)

from ..models.directive import Directive


class CtttLexer(RegexLexer):
    """
    Lexer for cttt directive comment lines

    Example:
        // @cttt.change(foo, bar)

    Tokens:
        //     → Comment
        @cttt  → Name.Decorator
        .      → Punctuation
        change → Keyword.Declaration
        (      → Punctuation
        foo    → String
        ,      → Punctuation
        bar    → String
        )      → Punctuation
    """

    name = 'cttt'
    aliases = ['cttt']
    filenames = []

    tokens = {
        'root': [
            # Namespace and built-in kinds
            (r'((?i:@cttt))(\.)(name|change)(\()',
             bygroups(Name.Decorator, Punctuation, Keyword.Declaration, Punctuation), 'args'),

            # Namespace and any other kind
            (r'((?i:@cttt))(\.)([A-Za-z0-9_-]+)(\()',
             bygroups(Name.Decorator, Punctuation, Name.Function, Punctuation), 'args'),

            # Comment text around the directive
            (r'\s+', Text),
            (r'[^@\s]+', Comment),
            (r'@', Comment),
        ],

        'args': [
            (r'\)', Punctuation, '#pop'),
            (r',', Punctuation),
            (r'\s+', Text),
            (r'[^,()\s]+', String),
        ],
    }


def get_lexer() -> CtttLexer:
    """
    Get the CtttLexer instance

    Returns:
        CtttLexer instance ready for use with Pygments
    """
    return CtttLexer()


def directive_highlight(directive: Directive) -> str:
    """
    Render a directive's comment line with terminal colors

    Args:
        directive: Directive whose source line is highlighted

    Returns:
        ANSI-colored line, without trailing newline
    """
    source = directive.comment or directive.render()
    return highlight(source, get_lexer(), TerminalFormatter()).rstrip("\n")
