"""Declaration formatter tests."""

from __future__ import annotations

import pytest
from swagger_typegen.codegen.core.formatter import FormatterError, format_typescript


def test_reindents_by_brace_depth() -> None:
    code = """
    declare namespace OpenAPI2 {
    export interface User {
          email?:    string;
    }
    export interface Team {
    id?: string;
    }
    }
    """

    assert format_typescript(code) == (
        "declare namespace OpenAPI2 {\n"
        "  export interface User {\n"
        "    email?: string;\n"
        "  }\n"
        "\n"
        "  export interface Team {\n"
        "    id?: string;\n"
        "  }\n"
        "}\n"
    )


def test_custom_indent_size() -> None:
    assert format_typescript("interface A {\nb: string;\n}", indent_size=4) == (
        "interface A {\n    b: string;\n}\n"
    )


def test_whitespace_inside_strings_is_kept() -> None:
    code = "interface A {\nkind?:   'a  b' |   \"c  d\";\n}"

    assert format_typescript(code) == "interface A {\n  kind?: 'a  b' | \"c  d\";\n}\n"


def test_braces_inside_strings_are_ignored() -> None:
    code = "interface A {\nbrace?: '{';\n}"

    assert format_typescript(code) == "interface A {\n  brace?: '{';\n}\n"


def test_block_comments_are_aligned() -> None:
    code = "/**\n* Banner\n*/\ninterface A {\n/** doc */\nb: string;\n}"

    assert format_typescript(code) == (
        "/**\n * Banner\n */\n\ninterface A {\n  /** doc */\n  b: string;\n}\n"
    )


def test_empty_blocks_are_followed_by_blank_line() -> None:
    code = "interface A {}\ninterface B {}"

    assert format_typescript(code) == "interface A {}\n\ninterface B {}\n"


def test_blank_input() -> None:
    assert format_typescript("") == ""
    assert format_typescript("\n   \n") == ""


@pytest.mark.parametrize(
    ("code", "message"),
    [
        ("interface A {\nb: string;", "left open"),
        ("}", "Unbalanced"),
        ("interface A {\nb?: 'oops;\n}", "Unterminated string"),
        ("/**\n * never closed", "Unterminated block comment"),
    ],
)
def test_malformed_input_raises(code: str, message: str) -> None:
    with pytest.raises(FormatterError, match=message):
        format_typescript(code)
