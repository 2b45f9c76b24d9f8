"""Lexical analyzer for a small C/JS-like language."""

from __future__ import annotations

__version__ = "0.1.0"


def analyze(source: str) -> str:
    """Tokenize source and render the tokens as a plain-text table."""
    from lexan.lexer import tokenize
    from lexan.render import render_text

    return render_text(tokenize(source))
