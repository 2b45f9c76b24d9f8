"""Rule table: reserved words and canonical names for brackets and delimiters.

Everything here is built once at import time and exposed read-only, so
concurrent scans can share it without coordination.
"""

from __future__ import annotations

from types import MappingProxyType

from lexan.tokens import TokenKind

KEYWORDS = frozenset(
    {
        "main",
        "void",
        "goto",
        "continue",
        "break",
        "switch",
        "case",
        "return",
        "sizeof",
        "int",
        "short",
        "double",
        "long",
        "float",
        "if",
        "else",
        "for",
        "while",
        "do",
        "const",
        "static",
        "struct",
        "union",
        "enum",
        "typedef",
        "auto",
        "register",
        "unsigned",
        "signed",
        "char",
        "boolean",
        "true",
        "false",
        "null",
        "this",
        "super",
        "new",
        "delete",
        "instanceof",
        "typeof",
        "var",
        "let",
        "function",
        "class",
        "interface",
        "package",
        "import",
        "export",
        "throw",
        "try",
        "catch",
        "finally",
        "debugger",
    }
)


def _build_rules() -> dict[str, str]:
    rules = {f"keyword_{word}": word for word in KEYWORDS}
    rules.update(
        {
            "LBRACKET": "(",
            "RBRACKET": ")",
            "LBRACE": "{",
            "RBRACE": "}",
            "LSBRACKET": "[",
            "RSBRACKET": "]",
            "delimiter_colon": ":",
            "delimiter_semicolon": ";",
            "delimiter_comma": ",",
            "delimiter_dot": ".",
        }
    )
    return rules


RULES = MappingProxyType(_build_rules())

BRACKET_KINDS = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        "[": TokenKind.LEFT_SQUARE_BRACKET,
        "]": TokenKind.RIGHT_SQUARE_BRACKET,
    }
)

DELIMITER_KINDS = MappingProxyType(
    {
        ":": TokenKind.DELIMITER_COLON,
        ";": TokenKind.DELIMITER_SEMICOLON,
        ",": TokenKind.DELIMITER_COMMA,
        ".": TokenKind.DELIMITER_DOT,
    }
)

# Dispatch classes, checked by the scanner in this order
COMBINED_OPERATORS = frozenset("+=.:>")
DELIMITER_CHARS = frozenset(":;,.")
BRACKET_CHARS = frozenset("(){}[]")
QUOTES = frozenset("'\"")
OPERATORS = frozenset("=!<>+-*^~&|%")


def is_keyword(text: str) -> bool:
    """Return True if text is a reserved word."""
    return f"keyword_{text}" in RULES


def bracket_kind(ch: str) -> TokenKind:
    """Return the canonical kind for a bracket character."""
    kind = BRACKET_KINDS.get(ch)
    if kind is not None:
        return kind
    return TokenKind.BRACKET


def delimiter_kind(ch: str) -> TokenKind:
    """Return the canonical kind for a delimiter character.

    Characters without a registered name fall back to the generic
    DELIMITER kind; the character itself then identifies the delimiter.
    """
    kind = DELIMITER_KINDS.get(ch)
    if kind is not None:
        return kind
    return TokenKind.DELIMITER
