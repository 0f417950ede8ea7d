"""
Лексер для разбора выражений директивы #if.

Выполняет токенизацию строки выражения, разбивая её на значимые элементы:
- Операторы ( ) ! && || == !=
- Строковые ("...") и числовые литералы
- Идентификаторы (любая последовательность непробельных символов, не являющихся операторами)
- Пробелы (игнорируются)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List


@dataclass
class Token:
    """
    Токен для парсинга выражений.

    Attributes:
        type: Тип токена (OPERATOR, IDENTIFIER, STRING, NUMBER, EOF)
        value: Значение токена (для STRING без кавычек и экранирования)
        position: Позиция в исходной строке
    """
    type: str
    value: str
    position: int

    def __repr__(self):
        return f"Token({self.type}, '{self.value}', pos={self.position})"


class LexerError(ValueError):
    """Ошибка токенизации выражения."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}")


_IDENT_CHARS = r'[^\s()!&|="]'
_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)


class ConditionLexer:
    """
    Лексер для разбиения строки выражения на токены.

    Порядок спецификаций важен: двухсимвольные операторы
    проверяются раньше односимвольных.
    """

    # Спецификация токенов: (regex_pattern, token_type, ignore_flag)
    TOKEN_SPECS = [
        (r'\s+', 'WHITESPACE', True),

        (r'&&', 'OPERATOR', False),
        (r'\|\|', 'OPERATOR', False),
        (r'==', 'OPERATOR', False),
        (r'!=', 'OPERATOR', False),
        (r'!', 'OPERATOR', False),
        (r'\(', 'OPERATOR', False),
        (r'\)', 'OPERATOR', False),

        (r'"(?:\\.|[^"\\])*"', 'STRING', False),
        (r'\d+(?!' + _IDENT_CHARS + r')', 'NUMBER', False),
        (_IDENT_CHARS + r'+', 'IDENTIFIER', False),

        # Одиночные & | = и незакрытые кавычки
        (r'"', 'UNTERMINATED', False),
        (r'.', 'UNKNOWN', False),
    ]

    def __init__(self):
        self._compiled_patterns = [
            (re.compile(pattern), token_type, ignore)
            for pattern, token_type, ignore in self.TOKEN_SPECS
        ]

    def tokenize(self, text: str) -> List[Token]:
        """
        Разбивает строку на токены.

        Returns:
            Список токенов, включая EOF в конце

        Raises:
            LexerError: При одиночном &, |, = или незакрытой строке
        """
        tokens: List[Token] = []
        position = 0

        while position < len(text):
            for pattern, token_type, ignore in self._compiled_patterns:
                match = pattern.match(text, position)
                if not match:
                    continue

                value = match.group(0)
                if token_type == 'UNTERMINATED':
                    raise LexerError("Unterminated string literal", position)
                if token_type == 'UNKNOWN':
                    raise LexerError(f"Unexpected character '{value}'", position)

                if not ignore:
                    if token_type == 'STRING':
                        value = _ESCAPE_RE.sub(r'\1', value[1:-1])
                    tokens.append(Token(type=token_type, value=value, position=position))

                position = match.end()
                break

        tokens.append(Token(type='EOF', value='', position=position))
        return tokens


__all__ = ["Token", "LexerError", "ConditionLexer"]
