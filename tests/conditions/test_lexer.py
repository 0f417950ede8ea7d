"""
Tests for the expression lexer.
"""

import pytest

from textpp.conditions.lexer import ConditionLexer, LexerError


class TestConditionLexer:

    def setup_method(self):
        self.lexer = ConditionLexer()

    def test_empty_string(self):
        """Test tokenization of empty string"""
        tokens = self.lexer.tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == 'EOF'

    def test_whitespace_ignored(self):
        """Test whitespace is ignored"""
        tokens = self.lexer.tokenize("   \t  ")
        assert len(tokens) == 1
        assert tokens[0].type == 'EOF'

    def test_operators(self):
        """Test recognition of operators"""
        for operator in ["(", ")", "!", "&&", "||", "==", "!="]:
            tokens = self.lexer.tokenize(operator)
            assert len(tokens) == 2  # operator + EOF
            assert tokens[0].type == 'OPERATOR'
            assert tokens[0].value == operator

    def test_identifiers(self):
        """Any run of non-operator, non-whitespace characters is an identifier"""
        for identifier in ["NAME", "test_var", "my-var", "Var123", "_private", "a.b/c", "x:y"]:
            tokens = self.lexer.tokenize(identifier)
            assert len(tokens) == 2
            assert tokens[0].type == 'IDENTIFIER'
            assert tokens[0].value == identifier

    def test_number_literal(self):
        tokens = self.lexer.tokenize("42")
        assert tokens[0].type == 'NUMBER'
        assert tokens[0].value == "42"

    def test_digits_followed_by_letters_are_identifier(self):
        tokens = self.lexer.tokenize("3abc")
        assert tokens[0].type == 'IDENTIFIER'
        assert tokens[0].value == "3abc"

    def test_string_literal(self):
        tokens = self.lexer.tokenize('"hello world"')
        assert tokens[0].type == 'STRING'
        assert tokens[0].value == "hello world"

    def test_string_literal_escapes(self):
        tokens = self.lexer.tokenize(r'"say \"hi\" \\ bye"')
        assert tokens[0].type == 'STRING'
        assert tokens[0].value == 'say "hi" \\ bye'

    def test_operators_split_identifiers(self):
        """Operators do not need surrounding whitespace"""
        tokens = self.lexer.tokenize("A&&!B||(C==D)")
        values = [t.value for t in tokens[:-1]]
        assert values == ["A", "&&", "!", "B", "||", "(", "C", "==", "D", ")"]

    def test_not_equal_is_single_token(self):
        tokens = self.lexer.tokenize("A!=B")
        assert [t.value for t in tokens[:-1]] == ["A", "!=", "B"]

    def test_positions(self):
        tokens = self.lexer.tokenize("A && B")
        assert [t.position for t in tokens] == [0, 2, 5, 6]

    @pytest.mark.parametrize("text", ["A & B", "A | B", "A = B"])
    def test_single_character_operators_rejected(self, text):
        with pytest.raises(LexerError, match="Unexpected character"):
            self.lexer.tokenize(text)

    def test_unterminated_string(self):
        with pytest.raises(LexerError, match="Unterminated string literal"):
            self.lexer.tokenize('A == "abc')
