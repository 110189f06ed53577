"""
Scanner comment-syntax tests

Tests the recognized comment openers/closers, whitespace tolerance, and the
permissive handling of malformed or out-of-comment directive text.
"""

import time

import pytest

from cttt import parse


COMMENT_SYNTAXES = [
    ("--", ""),
    ("!", ""),
    ("(*", "*)"),
    ("{-", "-}"),
    ("{", "}"),
    ("/*", "*/"),
    ("/**", "*/"),
    ("//", ""),
    ("///", ""),
    ('"""', '"""'),
    ("'''", "'''"),
    ("#", ""),
    ("<!--", "-->"),
]


class TestCommentSyntax:
    """Test every recognized comment opener"""

    @pytest.mark.parametrize("leading,trailing", COMMENT_SYNTAXES)
    def test_comment_syntax(self, leading, trailing):
        """Directive recognized after each opener, with its closer"""
        source = f"{leading} @cttt.foo(bar) {trailing}"
        directives = parse(source)

        assert len(directives) == 1
        assert directives[0].kind == "foo"
        assert directives[0].argument == "bar"
        assert directives[0].comment == source.rstrip()

    def test_no_space_after_opener(self):
        """Whitespace between opener and namespace is optional"""
        directives = parse("//@cttt.name(foo)")

        assert len(directives) == 1
        assert directives[0].column == 3

    def test_unpaired_closer_accepted(self):
        """Any closer is accepted after any opener"""
        directives = parse("// @cttt.name(a) */")

        assert len(directives) == 1
        assert directives[0].argument == "a"

    def test_block_comment_continuation(self):
        """' * ' continuation lines inside /** */ blocks"""
        source = (
            "\n"
            "            /**\n"
            "             * @cttt.named(123)\n"
            "             */\n"
            "            x = 123;\n"
            "            /**\n"
            "             * @cttt.noop(1)\n"
            "             */"
        )
        directives = parse(source)

        assert [(d.kind, d.line, d.column) for d in directives] == [
            ("named", 3, 16),
            ("noop", 7, 16),
        ]
        assert directives[0].comment == "             * @cttt.named(123)"

    def test_indented_comment(self):
        """Leading indentation is allowed and reflected in column"""
        directives = parse("    # @cttt.name(foo)")

        assert directives[0].column == 7


class TestNameAndArguments:
    """Test kind and argument forms"""

    def test_case_insensitive_namespace(self):
        """Namespace matches in any letter case; kind keeps its case"""
        source = "// @CTTT.named(SPECIAL_BLOCK)\n// @cttt.CHANGE(./foo.txt,abc)"
        directives = parse(source)

        assert directives[0].kind == "named"
        assert directives[0].argument == "SPECIAL_BLOCK"
        assert directives[1].kind == "CHANGE"
        assert directives[1].args == ("./foo.txt", "abc")

    def test_non_ascii_kind_skipped(self):
        """Kinds are ASCII only, wherever the non-ASCII letter appears"""
        assert parse("// @cttt.nämé(a)") == []
        assert parse("// @cttt.é(a)") == []

    def test_kebab_kind(self):
        """Kinds may contain hyphens"""
        directives = parse("// @cttt.named-bar-baz(x)")
        assert directives[0].kind == "named-bar-baz"

    def test_argument_whitespace_stripped(self):
        """Whitespace inside the parentheses is tolerated"""
        directives = parse("// @cttt.name(   foo   )")
        assert directives[0].argument == "foo"

    def test_args_whitespace_separated(self):
        """Comma-separated args are stripped"""
        directives = parse("// @cttt.change(foo, bar)")
        assert directives[0].args == ("foo", "bar")

    def test_args_trailing_comma(self):
        """Trailing comma adds no empty item"""
        directives = parse("// @cttt.change(foo, bar,)")

        assert directives[0].argument == "foo, bar,"
        assert directives[0].args == ("foo", "bar")

    def test_args_characters(self):
        """Paths and punctuation are allowed in arguments"""
        directives = parse("// @cttt.change(./aFoo_Bar-123)")
        assert directives[0].args == ("./aFoo_Bar-123",)

    def test_args_file_path(self):
        """Multiple file paths"""
        directives = parse("// @cttt.change(./foo/README.md, /bar/foo.rs)")
        assert directives[0].args == ("./foo/README.md", "/bar/foo.rs")


class TestIgnoredText:
    """Test that non-directive text is skipped, never raised"""

    @pytest.mark.parametrize("line", [
        'let s = "// @cttt.name(foo)";',
        "print('# @cttt.name(foo)')",
        "x = 1  # @cttt.name(foo)",
        '"// @cttt.name(foo)"',
        "@cttt.name(foo)",
    ])
    def test_outside_comment_prefix(self, line):
        """@cttt. not directly after a comment opener is ignored"""
        assert parse(line) == []

    @pytest.mark.parametrize("line", [
        "// @cttt.name(foo",
        "// @cttt.name()",
        "// @cttt.name( )",
        "// @cttt.name(,)",
        "// @cttt",
        "// @cttt.(foo)",
        "// @cttt.name((foo))",
        "// @cttt . name(foo)",
        "// @cttt.name (foo)",
        "// @cttt.name(foo) trailing code",
        "// @other.name(foo)",
    ])
    def test_malformed_skipped(self, line):
        """Malformed near-matches are skipped"""
        assert parse(line) == []

    def test_malformed_does_not_hide_neighbours(self):
        """A skipped line does not affect directives around it"""
        source = "// @cttt.name(a)\n// @cttt.name(\n// @cttt.change(b)"
        directives = parse(source)

        assert [(d.argument, d.line) for d in directives] == [("a", 1), ("b", 3)]

    def test_one_directive_per_line(self):
        """Two directives on one line do not match"""
        assert parse("// @cttt.name(a) @cttt.change(b)") == []

    def test_long_trailing_whitespace_then_code(self):
        """Whitespace followed by code after a directive is skipped in linear time"""
        line = "// @cttt.name(a)" + " " * 200_000 + "x"
        started = time.perf_counter()

        assert parse(line) == []
        assert time.perf_counter() - started < 2.0

    def test_long_trailing_whitespace_directive(self):
        """Trailing whitespace alone does not prevent a match"""
        directives = parse("// @cttt.name(a)" + " " * 200_000)

        assert len(directives) == 1
        assert directives[0].comment == "// @cttt.name(a)"

    def test_large_source(self):
        """Many lines of mixed code and directives scan completely"""
        lines = []
        for index in range(20_000):
            lines.append(f"// @cttt.name(n{index})")
            lines.append(f'let s{index} = "// @cttt.name(x)";' + " " * 50)
        started = time.perf_counter()
        directives = parse("\n".join(lines))

        assert len(directives) == 20_000
        assert directives[-1].line == 39_999
        assert time.perf_counter() - started < 10.0
