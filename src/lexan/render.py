"""Token table renderers: plain text, HTML, and JSON."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable

from lexan.tokens import Token, TokenKind

COLUMNS = ("Type", "Value", "Line", "Index", "Block")


def display_kind(tok: Token) -> str:
    """Type column text; a generic delimiter is shown as its own character."""
    if tok.kind is TokenKind.DELIMITER:
        return str(tok.value)
    return tok.kind.name


# Integral floats beyond this lose exact digits, so they print in float form
_MAX_EXACT = 2**53


def display_value(tok: Token) -> str:
    value = tok.value
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity"
        if value.is_integer() and abs(value) <= _MAX_EXACT:
            return str(int(value))
        return repr(value)
    return value


def _row(tok: Token) -> tuple[str, str, str, str, str]:
    return (
        display_kind(tok),
        display_value(tok),
        str(tok.line),
        str(tok.column),
        str(tok.block_depth),
    )


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------


def _escape_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")


def render_text(tokens: Iterable[Token]) -> str:
    """Render tokens as an aligned plain-text table with a header row."""
    rows = [COLUMNS] + [tuple(_escape_text(c) for c in _row(t)) for t in tokens]
    widths = [max(len(r[i]) for r in rows) for i in range(len(COLUMNS))]

    lines: list[str] = []
    for idx, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())
        if idx == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content. Also encodes non-ASCII as entities."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ch == '"':
            result.append("&quot;")
        elif ord(ch) > 0x7F:
            result.append(f"&#x{ord(ch):X};")
        else:
            result.append(ch)
    return "".join(result)


def render_html(tokens: Iterable[Token]) -> str:
    """Render tokens as an HTML table fragment."""
    parts: list[str] = ['<table class="tokens">\n', "<thead>\n<tr>"]
    for name in COLUMNS:
        parts.append(f"<th>{name}</th>")
    parts.append("</tr>\n</thead>\n<tbody>\n")
    for tok in tokens:
        parts.append("<tr>")
        for cell in _row(tok):
            parts.append(f"<td>{_escape_html(cell)}</td>")
        parts.append("</tr>\n")
    parts.append("</tbody>\n</table>\n")
    return "".join(parts)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def _is_inf(value: str | float) -> bool:
    return isinstance(value, float) and math.isinf(value)


def token_to_dict(tok: Token) -> dict[str, object]:
    return {
        "kind": tok.kind.name,
        "value": display_value(tok) if _is_inf(tok.value) else tok.value,
        "line": tok.line,
        "column": tok.column,
        "block_depth": tok.block_depth,
    }


def render_json(tokens: Iterable[Token]) -> str:
    """Render tokens as a JSON array of objects, one per token."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=2) + "\n"


RENDERERS = {
    "text": render_text,
    "html": render_html,
    "json": render_json,
}
