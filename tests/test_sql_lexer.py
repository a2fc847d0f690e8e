"""Tests for the SQL lexer."""

import pytest

from sql_align.errors import TokenizeError
from sql_align.parsing.sql_lexer import SqlLexer, token_end


class TestSqlLexer:
    """Tests for the SQL lexer."""

    def test_tokenize_tuple(self):
        """Test tokenizing a simple tuple."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("(1, 'api', NULL)")
        token_types = [t.type for t in tokens]

        assert token_types == ["LPAREN", "WORD", "COMMA", "STRING", "COMMA", "WORD", "RPAREN"]

    def test_string_keeps_quotes(self):
        """Test that string tokens keep their quotes and doubled escapes."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("'it''s'")

        assert len(tokens) == 1
        assert tokens[0].type == "STRING"
        assert tokens[0].value == "'it''s'"

    def test_comma_inside_string(self):
        """Test that commas and parentheses inside strings are not tokens."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("'a, (b)'")

        assert [t.type for t in tokens] == ["STRING"]

    def test_quoted_identifiers(self):
        """Test double-quoted and backtick identifiers."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize('"my table" `col,1`')

        assert [t.type for t in tokens] == ["QUOTED", "QUOTED"]

    def test_comments(self):
        """Test line and block comments."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("a -- note (x)\n/* b;\n c */ d")
        token_types = [t.type for t in tokens]

        assert token_types == ["WORD", "COMMENT", "COMMENT", "WORD"]
        assert tokens[1].value == "-- note (x)"

    def test_line_comment_stops_before_crlf(self):
        """Test that a line comment does not include a carriage return."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("-- note\r\nx")

        assert [(t.type, t.value) for t in tokens] == [("COMMENT", "-- note"), ("WORD", "x")]

    def test_negative_number_is_word(self):
        """Test that a signed numeral is a single word."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("-12.5")

        assert [(t.type, t.value) for t in tokens] == [("WORD", "-12.5")]

    def test_semicolon(self):
        """Test the statement terminator."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("(1);")

        assert tokens[-1].type == "SEMICOLON"

    def test_line_numbers(self):
        """Test that newlines, including those in strings, are counted."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("a\n'x\ny'\nb")

        assert [t.lineno for t in tokens] == [1, 2, 4]

    def test_token_end(self):
        """Test the end offset helper."""
        lexer = SqlLexer()
        lexer.build()

        tokens = lexer.tokenize("  'abc' x")

        assert token_end(tokens[0]) == 7
        assert token_end(tokens[1]) == 9

    def test_unterminated_string(self):
        """Test error on an unterminated quoted literal."""
        lexer = SqlLexer()
        lexer.build()

        with pytest.raises(TokenizeError) as exc_info:
            lexer.tokenize("(1, 'abc")

        assert exc_info.value.offset == 4
        assert "unterminated" in exc_info.value.message

    def test_unterminated_block_comment(self):
        """Test error on an unterminated block comment."""
        lexer = SqlLexer()
        lexer.build()

        with pytest.raises(TokenizeError, match="block comment"):
            lexer.tokenize("a /* never closed")
