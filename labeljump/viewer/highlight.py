"""Per-character syntax styles via Pygments.

The renderer overlays labels and cursors on single characters, so
highlighting produces one ANSI prefix per character instead of a
pre-formatted string. Any lexer or style failure degrades to no styling.
"""

from __future__ import annotations

from pathlib import Path

from pygments import lex
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_STYLE_CACHE: dict[str, type] = {}

LineStyles = list[list[str]]


def _style_class(name: str):
    """Return the Pygments style class for ``name``, falling back to monokai."""
    cached = _STYLE_CACHE.get(name)
    if cached is not None:
        return cached
    try:
        style_cls = get_style_by_name(name)
    except ClassNotFound:
        style_cls = get_style_by_name(DEFAULT_STYLE)
    _STYLE_CACHE[name] = style_cls
    return style_cls


def _lexer_for(path: Path | None, source: str):
    options = {"stripnl": False, "ensurenl": False}
    if path is not None:
        try:
            return get_lexer_for_filename(path.name, source, **options)
        except ClassNotFound:
            pass
    return TextLexer(**options)


def _hex_to_sgr(color: str, background: bool = False) -> str:
    color = color.lstrip("#")
    if len(color) != 6:
        return ""
    red, green, blue = (int(color[i : i + 2], 16) for i in (0, 2, 4))
    return f"{48 if background else 38};2;{red};{green};{blue}"


def token_sgr(style_cls, token_type: object) -> str:
    """Return the ANSI escape for one token type, or ``""`` for unstyled."""
    token_style = style_cls.style_for_token(token_type)
    parts: list[str] = []
    if token_style.get("bold"):
        parts.append("1")
    if token_style.get("italic"):
        parts.append("3")
    if token_style.get("underline"):
        parts.append("4")
    if token_style.get("color"):
        sgr = _hex_to_sgr(token_style["color"])
        if sgr:
            parts.append(sgr)
    if not parts:
        return ""
    return "\033[" + ";".join(parts) + "m"


def highlight_lines(lines: list[str], path: Path | None = None, style: str = DEFAULT_STYLE) -> LineStyles:
    """Return one ANSI prefix per character of every line.

    The result always has the same shape as ``lines``; characters a lexer
    leaves unstyled get ``""``.
    """
    styles: LineStyles = [[""] * len(line) for line in lines]
    if not lines:
        return styles
    source = "\n".join(lines)
    style_cls = _style_class(style)
    sgr_cache: dict[object, str] = {}

    line_idx = 0
    column = 0
    try:
        for token_type, value in lex(source, _lexer_for(path, source)):
            sgr = sgr_cache.get(token_type)
            if sgr is None:
                sgr = token_sgr(style_cls, token_type)
                sgr_cache[token_type] = sgr
            for ch in value:
                if ch == "\n":
                    line_idx += 1
                    column = 0
                    continue
                if line_idx >= len(styles):
                    return styles
                row = styles[line_idx]
                if column < len(row):
                    row[column] = sgr
                column += 1
    except Exception:
        return [[""] * len(line) for line in lines]
    return styles
