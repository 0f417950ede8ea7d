"""
Классификация строк документа.

Каждая строка за один шаг превращается в значение Directive с одним
из фиксированного набора видов. Строка, начинающаяся с '#', но не
совпадающая ни с одной формой (например, заголовок Markdown),
получает вид NONE и обрабатывается как обычный контент.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class DirectiveKind(enum.Enum):
    INCLUDE = "include"
    IFDEF = "ifdef"
    IF = "if"
    ELSE = "else"
    ENDIF = "endif"
    NONE = "none"


@dataclass(frozen=True)
class Directive:
    """
    Результат классификации строки.

    argument: путь для INCLUDE (без кавычек, до подстановки ##NAME##),
    имя для IFDEF, текст выражения для IF; пустая строка для остальных.
    """
    kind: DirectiveKind
    argument: str = ""

    @property
    def is_directive(self) -> bool:
        return self.kind is not DirectiveKind.NONE


NOT_A_DIRECTIVE = Directive(DirectiveKind.NONE)

# Порядок важен: #ifdef проверяется раньше #if
_PATTERNS = [
    (DirectiveKind.INCLUDE, re.compile(r'^#include\s+"(?P<arg>[^"]*)"\s*$')),
    (DirectiveKind.IFDEF, re.compile(r'^#ifdef(?:\s+(?P<arg>\S+))?\s*$')),
    (DirectiveKind.IF, re.compile(r'^#if(?:(?=[\s(])(?P<arg>.*))?$')),
    (DirectiveKind.ELSE, re.compile(r'^#else(?:\s.*)?$')),
    (DirectiveKind.ENDIF, re.compile(r'^#endif(?:\s.*)?$')),
]


def classify_line(line: str) -> Directive:
    """Определяет вид директивы для строки без завершающего перевода строки."""
    if not line.startswith("#"):
        return NOT_A_DIRECTIVE

    for kind, pattern in _PATTERNS:
        match = pattern.match(line)
        if match:
            arg = match.groupdict().get("arg") or ""
            if kind is not DirectiveKind.INCLUDE:
                arg = arg.strip()
            return Directive(kind, arg)

    return NOT_A_DIRECTIVE


__all__ = ["DirectiveKind", "Directive", "NOT_A_DIRECTIVE", "classify_line"]
