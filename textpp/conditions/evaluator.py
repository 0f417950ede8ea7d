"""
Вычислитель выражений директивы #if.

Проходит по AST и вычисляет его значение, разрешая идентификаторы
через таблицу определений.
"""

from __future__ import annotations

from typing import cast

from .model import (
    Condition,
    ConditionType,
    IdentifierCondition,
    LiteralCondition,
    ComparisonCondition,
    GroupCondition,
    NotCondition,
    BinaryCondition,
)
from ..symbols import SymbolTable, truthy


class EvaluationError(Exception):
    """Ошибка при вычислении выражения."""
    pass


class ConditionEvaluator:
    """
    Вычислитель выражений.

    Принимает AST выражения и таблицу определений, возвращает булево значение.
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols

    def evaluate(self, condition: Condition) -> bool:
        """
        Вычисляет булево значение узла.

        Raises:
            EvaluationError: При неизвестном типе узла
        """
        condition_type = condition.get_type()

        if condition_type in (ConditionType.IDENTIFIER, ConditionType.LITERAL):
            return truthy(self.operand_value(condition))
        elif condition_type in (ConditionType.EQ, ConditionType.NEQ):
            return self._evaluate_comparison(cast(ComparisonCondition, condition))
        elif condition_type == ConditionType.GROUP:
            return self.evaluate(cast(GroupCondition, condition).condition)
        elif condition_type == ConditionType.NOT:
            return not self.evaluate(cast(NotCondition, condition).condition)
        elif condition_type == ConditionType.AND:
            return self._evaluate_and(cast(BinaryCondition, condition))
        elif condition_type == ConditionType.OR:
            return self._evaluate_or(cast(BinaryCondition, condition))
        else:
            raise EvaluationError(f"Unknown condition type: {condition_type}")

    def operand_value(self, condition: Condition) -> str:
        """
        Строковое значение операнда до любого приведения к bool.

        Идентификатор разрешается через таблицу (неопределённый даёт пустую строку),
        литерал возвращает собственный текст.
        """
        if isinstance(condition, IdentifierCondition):
            return self.symbols.resolve(condition.name)
        if isinstance(condition, LiteralCondition):
            return condition.value
        raise EvaluationError(f"Not an operand: {condition}")

    def _evaluate_comparison(self, condition: ComparisonCondition) -> bool:
        left = self.operand_value(condition.left)
        right = self.operand_value(condition.right)
        if condition.operator == ConditionType.EQ:
            return left == right
        return left != right

    def _evaluate_and(self, condition: BinaryCondition) -> bool:
        if not self.evaluate(condition.left):
            return False  # Короткое вычисление
        return self.evaluate(condition.right)

    def _evaluate_or(self, condition: BinaryCondition) -> bool:
        if self.evaluate(condition.left):
            return True  # Короткое вычисление
        return self.evaluate(condition.right)


def evaluate_condition_string(condition_str: str, symbols: SymbolTable) -> bool:
    """
    Удобная функция для вычисления выражения из строки.

    Raises:
        ParseError: При ошибке парсинга
        EvaluationError: При ошибке вычисления
    """
    from .parser import ConditionParser

    parser = ConditionParser()
    ast = parser.parse(condition_str)

    evaluator = ConditionEvaluator(symbols)
    return evaluator.evaluate(ast)
