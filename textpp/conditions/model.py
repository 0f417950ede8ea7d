"""
Модели данных для выражений директивы #if.

Содержит классы узлов AST, которые строит парсер и обходит вычислитель.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ConditionType(Enum):
    """Типы узлов выражения."""
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    EQ = "eq"
    NEQ = "neq"
    AND = "and"
    OR = "or"
    NOT = "not"
    GROUP = "group"  # для явной группировки в скобках


@dataclass
class Condition(ABC):
    """Базовый абстрактный класс для всех узлов выражения."""

    @abstractmethod
    def get_type(self) -> ConditionType:
        """Возвращает тип узла."""
        pass

    def __str__(self) -> str:
        return self._to_string()

    @abstractmethod
    def _to_string(self) -> str:
        pass


@dataclass
class IdentifierCondition(Condition):
    """
    Имя переменной: NAME

    В булевом контексте истинно, если разрешённое значение truthy.
    В сравнении используется само разрешённое значение.
    """
    name: str

    def get_type(self) -> ConditionType:
        return ConditionType.IDENTIFIER

    def _to_string(self) -> str:
        return self.name


@dataclass
class LiteralCondition(Condition):
    """
    Литерал: "строка" или 123

    Вычисляется в собственный текст без обращения к таблице определений.
    """
    value: str

    def get_type(self) -> ConditionType:
        return ConditionType.LITERAL

    def _to_string(self) -> str:
        if self.value.isdigit():
            return self.value
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


# Операнд сравнения
Operand = Union[IdentifierCondition, LiteralCondition]


@dataclass
class ComparisonCondition(Condition):
    """
    Сравнение строк: left == right, left != right

    Сравниваются разрешённые значения операндов, точное совпадение строк.
    """
    left: Operand
    right: Operand
    operator: ConditionType  # EQ или NEQ

    def get_type(self) -> ConditionType:
        return self.operator

    def _to_string(self) -> str:
        op_str = "==" if self.operator == ConditionType.EQ else "!="
        return f"{self.left} {op_str} {self.right}"


@dataclass
class GroupCondition(Condition):
    """Группа в скобках: (expr)"""
    condition: Condition

    def get_type(self) -> ConditionType:
        return ConditionType.GROUP

    def _to_string(self) -> str:
        return f"({self.condition})"


@dataclass
class NotCondition(Condition):
    """Отрицание: !expr"""
    condition: Condition

    def get_type(self) -> ConditionType:
        return ConditionType.NOT

    def _to_string(self) -> str:
        return f"!{self.condition}"


@dataclass
class BinaryCondition(Condition):
    """
    Бинарная логическая операция: left && right, left || right
    """
    left: Condition
    right: Condition
    operator: ConditionType  # AND или OR

    def get_type(self) -> ConditionType:
        return self.operator

    def _to_string(self) -> str:
        op_str = "&&" if self.operator == ConditionType.AND else "||"
        return f"{self.left} {op_str} {self.right}"


__all__ = [
    "Condition",
    "ConditionType",
    "IdentifierCondition",
    "LiteralCondition",
    "Operand",
    "ComparisonCondition",
    "GroupCondition",
    "NotCondition",
    "BinaryCondition",
]
