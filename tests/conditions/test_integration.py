"""
Integration tests for the expression system.

Tests the full pipeline: tokenizing -> parsing -> evaluation
against a SymbolTable.
"""

import pytest

from textpp.conditions import (
    ConditionParser,
    ConditionEvaluator,
    ParseError,
    evaluate_condition_string,
)
from textpp.symbols import SymbolTable


class TestConditionsIntegration:

    def test_end_to_end_pipeline(self):
        """Test full expression processing pipeline"""
        symbols = SymbolTable({
            "DEBUG": "TRUE",
            "TARGET": "linux",
            "HOST": "linux",
            "FEATURE": "off",
        })

        # Set of test cases: (expression, expected result)
        test_cases = [
            ("DEBUG", True),
            ("FEATURE", True),      # "off" is not in the false set
            ("MISSING", False),
            ("!MISSING", True),
            ("DEBUG && TARGET == HOST", True),
            ("DEBUG && TARGET != HOST", False),
            ('TARGET == "linux" || TARGET == "mac"', True),
            ("(DEBUG || MISSING) && !(TARGET == MISSING)", True),
            ("!(DEBUG && HOST)", False),
        ]

        parser = ConditionParser()
        evaluator = ConditionEvaluator(symbols)
        for expression, expected in test_cases:
            result = evaluator.evaluate(parser.parse(expression))
            assert result is expected, f"Expression '{expression}' should be {expected}"

    def test_evaluate_condition_string(self):
        symbols = SymbolTable({"A": "TRUE"})

        assert evaluate_condition_string("(A && !B)", symbols) is True
        assert evaluate_condition_string("A == B", symbols) is False

    def test_evaluate_condition_string_parse_error(self):
        with pytest.raises(ParseError):
            evaluate_condition_string("(A &&)", SymbolTable())

    def test_mixed_literals_like_command_line_usage(self):
        """Quoted strings and digit runs compare by their own text"""
        symbols = SymbolTable({"VAR2": "3", "VAR3": "aaa", "VAR4": "bbb", "VAR5": "ccc"})
        expression = (
            'VAR || VAR2 == 3 && VAR3 == "aaa" || VAR4 != "bbb" '
            '|| !(VAR3 == "aaa" || VAR5=="ccc")'
        )
        assert evaluate_condition_string(expression, symbols) is True
        assert evaluate_condition_string('VAR4 != "bbb" || VAR2 == 4', symbols) is False
