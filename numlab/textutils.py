"""Small string helpers: space removal and splitting."""

from __future__ import annotations

import re


def strip(text: str) -> str:
    """Remove every space character from ``text``."""
    return text.replace(" ", "")


def split(text: str, delim: str | None = None) -> list[str]:
    """Split by ``delim``, dropping one trailing empty piece; without ``delim`` split into characters."""
    if delim is None:
        return list(text)
    if not text:
        return []
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def _segments(text: str, regex: re.Pattern[str]) -> list[str]:
    """Pieces of ``text`` between matches; a trailing empty piece is left out."""
    pieces = []
    pos = 0
    for match in regex.finditer(text):
        pieces.append(text[pos : match.start()])
        pos = match.end()
    if pos < len(text):
        pieces.append(text[pos:])
    return pieces


def split_by_regex(text: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Tokenize ``text`` into the pieces between separators and the separator runs themselves.

    Separator runs between two pieces are kept as one token; whatever is left
    once no further piece can be found is split into single characters.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    tokens: list[str] = []
    rest = text
    while rest:
        segments = _segments(rest, regex)
        if segments and segments[0] == "":
            segments = segments[1:]
        if not segments or segments[0] == "":
            break
        piece = segments[0]
        pos = rest.find(piece)
        if pos > 0:
            tokens.append(rest[:pos])
        tokens.append(piece)
        rest = rest[pos + len(piece) :]
    tokens.extend(rest)
    return tokens