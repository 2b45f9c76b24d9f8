"""Tests for the token table renderers."""

from __future__ import annotations

import json

import pytest

from lexan import analyze
from lexan.lexer import tokenize
from lexan.render import (
    COLUMNS,
    RENDERERS,
    display_kind,
    display_value,
    render_html,
    render_json,
    render_text,
)
from lexan.tokens import Token, TokenKind


class TestDisplay:
    def test_kind_name(self) -> None:
        tok = Token(TokenKind.LEFT_BRACE, "{", 1, 0, 1)
        assert display_kind(tok) == "LEFT_BRACE"

    def test_generic_delimiter_shows_character(self) -> None:
        tok = Token(TokenKind.DELIMITER, "?", 1, 0, 0)
        assert display_kind(tok) == "?"

    def test_integral_number(self) -> None:
        assert display_value(Token(TokenKind.NUMBER, 5.0, 1, 0, 0)) == "5"

    def test_fractional_number(self) -> None:
        assert display_value(Token(TokenKind.NUMBER, 1.5, 1, 0, 0)) == "1.5"

    def test_large_integral_number_uses_float_form(self) -> None:
        tok = Token(TokenKind.NUMBER, 1.2345678901234568e23, 1, 0, 0)
        assert display_value(tok) == "1.2345678901234568e+23"

    def test_exact_integer_limit(self) -> None:
        assert display_value(Token(TokenKind.NUMBER, float(2**53), 1, 0, 0)) == str(2**53)

    def test_overflowed_number(self) -> None:
        tokens = tokenize("9" * 400)
        assert display_value(tokens[0]) == "Infinity"

    def test_text_value(self) -> None:
        assert display_value(Token(TokenKind.STRING, "hi", 1, 0, 0)) == "hi"


class TestText:
    def test_header_and_rows(self) -> None:
        lines = render_text(tokenize("x=5")).splitlines()
        assert lines[0].split() == list(COLUMNS)
        assert set(lines[1]) <= {"-", " "}
        assert lines[2].split() == ["IDENTIFIER", "x", "1", "0", "0"]
        assert lines[3].split() == ["OPERATOR", "=", "1", "0", "0"]
        assert lines[4].split() == ["NUMBER", "5", "1", "2", "0"]

    def test_columns_aligned(self) -> None:
        lines = render_text(tokenize("while x")).splitlines()
        assert lines[2].index("while") == lines[3].index("x")

    def test_control_characters_escaped(self) -> None:
        out = render_text(tokenize("a\n"))
        assert "\\n" in out
        assert out.count("\n") == 4

    def test_empty(self) -> None:
        lines = render_text([]).splitlines()
        assert len(lines) == 2

    def test_analyze_shortcut(self) -> None:
        assert analyze("{ }") == render_text(tokenize("{ }"))


class TestHtml:
    def test_table_structure(self) -> None:
        html = render_html(tokenize("{"))
        assert html.startswith('<table class="tokens">')
        assert "<th>Type</th><th>Value</th><th>Line</th><th>Index</th><th>Block</th>" in html
        assert "<tr><td>LEFT_BRACE</td><td>{</td><td>1</td><td>0</td><td>1</td></tr>" in html

    def test_escaping(self) -> None:
        html = render_html(tokenize("'<a & \"b\">'"))
        assert "<td>&lt;a &amp; &quot;b&quot;&gt;</td>" in html

    def test_non_ascii_entity(self) -> None:
        html = render_html(tokenize("'é'"))
        assert "&#xE9;" in html


class TestJson:
    def test_round_trip_fields(self) -> None:
        data = json.loads(render_json(tokenize("{ 2.5")))
        assert data == [
            {"kind": "LEFT_BRACE", "value": "{", "line": 1, "column": 0, "block_depth": 1},
            {"kind": "NUMBER", "value": 2.5, "line": 1, "column": 2, "block_depth": 1},
        ]

    def test_empty(self) -> None:
        assert json.loads(render_json([])) == []

    def test_overflowed_number_is_valid_json(self) -> None:
        out = render_json(tokenize("9" * 400))
        assert "Infinity" in out
        data = json.loads(out, parse_constant=lambda name: pytest.fail(f"non-standard {name}"))
        assert data[0]["value"] == "Infinity"


class TestRegistry:
    def test_formats(self) -> None:
        assert set(RENDERERS) == {"text", "html", "json"}
