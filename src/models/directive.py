"""
Directive record and comment-syntax constants

Defines the immutable Directive produced by the scanner, together with the
namespace token and the comment openers/closers that frame a directive line.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


# Namespace token introducing every directive (matched case-insensitively)
NAMESPACE: str = "@cttt"

# Tokens that may open a directive comment line
COMMENT_OPENERS: Tuple[str, ...] = (
    "//",     # C, C++, Rust, JS, Go
    "///",    # Rust doc comments
    "/*",
    "/**",
    "*",      # block comment continuation
    "#",      # Python, shell, YAML
    "--",     # SQL, Lua, Haskell
    "!",      # Fortran
    "(*",     # OCaml, Pascal
    "{-",     # Haskell block
    "{",      # Pascal
    "<!--",   # HTML, XML, Markdown
    '"""',
    "'''",
)

# Tokens that may close a directive comment line
COMMENT_CLOSERS: Tuple[str, ...] = (
    "*/",
    "-->",
    "*)",
    "-}",
    "}",
    '"""',
    "'''",
)


@dataclass(frozen=True)
class Directive:
    """
    One recognized directive annotation

    Created by the Scanner for each matching comment line and never
    mutated afterwards.

    Attributes:
        kind: Directive category exactly as written (e.g., "name", "change")
        argument: Text inside the parentheses, stripped of surrounding whitespace
        line: 1-based physical line containing the comment
        column: 1-based column of the namespace token on that line
        args: Comma-separated items of argument, stripped, empty items dropped
        comment: The physical line with trailing whitespace removed

    Example:
        For "// @cttt.change(foo, bar)" on line 3:
        Directive(kind="change", argument="foo, bar", line=3, column=4,
                  args=("foo", "bar"), comment="// @cttt.change(foo, bar)")
    """
    kind: str
    argument: str
    line: int
    column: int = 1
    args: Tuple[str, ...] = field(default_factory=tuple)
    comment: str = ""

    def render(self) -> str:
        """Canonical textual form, e.g. '// @cttt.name(foo)'"""
        return f"// {NAMESPACE}.{self.kind}({self.argument})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping of all fields"""
        return {
            "kind": self.kind,
            "argument": self.argument,
            "args": list(self.args),
            "line": self.line,
            "column": self.column,
            "comment": self.comment,
        }


def args_split(argument: str) -> Tuple[str, ...]:
    """Split a directive argument on commas, dropping empty items"""
    return tuple(item.strip() for item in argument.split(",") if item.strip())
