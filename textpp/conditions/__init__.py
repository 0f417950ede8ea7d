"""
Выражения директивы #if: лексер, парсер, модель AST и вычислитель.
"""

from .evaluator import ConditionEvaluator, EvaluationError, evaluate_condition_string
from .lexer import ConditionLexer, LexerError, Token
from .model import (
    BinaryCondition,
    ComparisonCondition,
    Condition,
    ConditionType,
    GroupCondition,
    IdentifierCondition,
    LiteralCondition,
    NotCondition,
)
from .parser import ConditionParser, ParseError

__all__ = [
    "ConditionLexer",
    "LexerError",
    "Token",
    "ConditionParser",
    "ParseError",
    "ConditionEvaluator",
    "EvaluationError",
    "evaluate_condition_string",
    "Condition",
    "ConditionType",
    "IdentifierCondition",
    "LiteralCondition",
    "ComparisonCondition",
    "GroupCondition",
    "NotCondition",
    "BinaryCondition",
]
