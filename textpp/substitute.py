"""
Substitution of inline variable tokens.

Content lines use ``$$NAME$$``, include paths use ``##NAME##``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .symbols import SymbolTable


@dataclass(frozen=True)
class Delimiters:
    open: str
    close: str


CONTENT_DELIMITERS = Delimiters("$$", "$$")
INCLUDE_PATH_DELIMITERS = Delimiters("##", "##")


def substitute(text: str, table: SymbolTable, delimiters: Delimiters = CONTENT_DELIMITERS) -> str:
    """
    Replaces every delimited token with the resolved value of the enclosed name.

    Undefined names resolve to the empty string. An opening delimiter without
    a closing one is kept verbatim. Inserted values are not scanned again.
    """
    out = []
    pos = 0
    while True:
        start = text.find(delimiters.open, pos)
        if start < 0:
            break
        name_start = start + len(delimiters.open)
        end = text.find(delimiters.close, name_start)
        if end < 0:
            break
        out.append(text[pos:start])
        out.append(table.resolve(text[name_start:end]))
        pos = end + len(delimiters.close)
    out.append(text[pos:])
    return "".join(out)


def substitute_content(text: str, table: SymbolTable) -> str:
    return substitute(text, table, CONTENT_DELIMITERS)


def substitute_include_path(text: str, table: SymbolTable) -> str:
    return substitute(text, table, INCLUDE_PATH_DELIMITERS)


__all__ = [
    "Delimiters",
    "CONTENT_DELIMITERS",
    "INCLUDE_PATH_DELIMITERS",
    "substitute",
    "substitute_content",
    "substitute_include_path",
]
