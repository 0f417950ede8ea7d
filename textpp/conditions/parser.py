"""
Парсер выражений директивы #if с рекурсивным спуском.

Строит абстрактное синтаксическое дерево (AST) из последовательности токенов.
Поддерживает приоритеты операторов и группировку в скобках.

Грамматика:
expression     → or_expression
or_expression  → and_expression ("||" and_expression)*
and_expression → unary ("&&" unary)*
unary          → "!" unary | comparison | atom
comparison     → operand ("==" | "!=") operand
atom           → "(" expression ")" | operand
operand        → IDENTIFIER | STRING | NUMBER
"""

from __future__ import annotations

from typing import List

from .lexer import ConditionLexer, LexerError, Token
from .model import (
    Condition,
    ConditionType,
    IdentifierCondition,
    LiteralCondition,
    Operand,
    ComparisonCondition,
    GroupCondition,
    NotCondition,
    BinaryCondition,
)


class ParseError(Exception):
    """Ошибка парсинга выражения."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Parse error at position {position}: {message}")


_COMPARISON_OPERATORS = {
    "==": ConditionType.EQ,
    "!=": ConditionType.NEQ,
}


class ConditionParser:
    """
    Парсер выражений с рекурсивным спуском, без возвратов.

    Преобразует список токенов в AST, соблюдая приоритеты
    операторов и правила группировки.
    """

    def __init__(self):
        self.lexer = ConditionLexer()
        self._tokens: List[Token] = []
        self._position = 0

    def parse(self, condition_str: str) -> Condition:
        """
        Парсит строку выражения в AST.

        Raises:
            ParseError: При лексической или синтаксической ошибке
        """
        try:
            self._tokens = self.lexer.tokenize(condition_str)
        except LexerError as e:
            raise ParseError(e.message, e.position) from e
        self._position = 0

        if len(self._tokens) == 1 and self._tokens[0].type == 'EOF':
            raise ParseError("Empty expression", 0)

        result = self._parse_expression()

        if not self._is_at_end():
            current = self._current_token()
            raise ParseError(f"Unexpected token '{current.value}'", current.position)

        return result

    def _parse_expression(self) -> Condition:
        return self._parse_or_expression()

    def _parse_or_expression(self) -> Condition:
        """Оператор || (низший приоритет)."""
        left = self._parse_and_expression()

        while self._match_operator("||"):
            right = self._parse_and_expression()
            left = BinaryCondition(left=left, right=right, operator=ConditionType.OR)

        return left

    def _parse_and_expression(self) -> Condition:
        """Оператор && (средний приоритет)."""
        left = self._parse_unary()

        while self._match_operator("&&"):
            right = self._parse_unary()
            left = BinaryCondition(left=left, right=right, operator=ConditionType.AND)

        return left

    def _parse_unary(self) -> Condition:
        if self._match_operator("!"):
            condition = self._parse_unary()  # Правая ассоциативность для !
            return NotCondition(condition=condition)

        return self._parse_atom()

    def _parse_atom(self) -> Condition:
        """Группа в скобках, операнд или сравнение двух операндов."""
        if self._match_operator("("):
            expr = self._parse_expression()
            if not self._match_operator(")"):
                raise ParseError("Expected ')' after grouped expression", self._current_position())
            return GroupCondition(condition=expr)

        left = self._parse_operand()

        current = self._current_token()
        if current.type == 'OPERATOR' and current.value in _COMPARISON_OPERATORS:
            self._advance()
            right = self._parse_operand()
            return ComparisonCondition(
                left=left,
                right=right,
                operator=_COMPARISON_OPERATORS[current.value],
            )

        return left

    def _parse_operand(self) -> Operand:
        current = self._current_token()
        if current.type == 'IDENTIFIER':
            self._advance()
            return IdentifierCondition(name=current.value)
        if current.type in ('STRING', 'NUMBER'):
            self._advance()
            return LiteralCondition(value=current.value)

        if current.type == 'EOF':
            raise ParseError("Unexpected end of expression", current.position)
        raise ParseError(f"Unexpected token '{current.value}'", current.position)

    # Вспомогательные методы для работы с токенами

    def _current_token(self) -> Token:
        if self._position >= len(self._tokens):
            return Token(type='EOF', value='', position=len(self._tokens))
        return self._tokens[self._position]

    def _current_position(self) -> int:
        return self._current_token().position

    def _is_at_end(self) -> bool:
        return self._current_token().type == 'EOF'

    def _advance(self) -> Token:
        """Продвигает позицию и возвращает предыдущий токен."""
        if not self._is_at_end():
            self._position += 1
        return self._tokens[self._position - 1] if self._position > 0 else self._current_token()

    def _match_operator(self, operator: str) -> bool:
        """Проверяет и потребляет оператор."""
        current = self._current_token()
        if current.type == 'OPERATOR' and current.value == operator:
            self._advance()
            return True
        return False


__all__ = ["ParseError", "ConditionParser"]
