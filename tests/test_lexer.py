"""TokenReader 测试"""
import io

import pytest

from core.lexer import TokenReader
from core.token_system import Token, TokenType, CONTROL_TOKENS
from utils.console import Console


def make_reader(text):
    out = io.StringIO()
    return TokenReader(io.StringIO(text), Console(out)), out


def line_tokens(text):
    reader, _ = make_reader(text)
    return list(reader)


def test_expression_tokens():
    assert line_tokens("3 + 4 * (2 - 1)\n") == [
        Token.value_token(3),
        Token.operator_token('+'),
        Token.value_token(4),
        Token.operator_token('*'),
        Token.operator_token('('),
        Token.value_token(2),
        Token.operator_token('-'),
        Token.value_token(1),
        Token.operator_token(')'),
        CONTROL_TOKENS['EOLN'],
    ]


def test_no_whitespace_needed():
    assert line_tokens("12*3") == [
        Token.value_token(12),
        Token.operator_token('*'),
        Token.value_token(3),
        CONTROL_TOKENS['EOLN'],
    ]


@pytest.mark.parametrize("digits", ["0", "7", "10", "0042", "123456", "2147483647"])
def test_maximal_digit_run_is_one_value(digits):
    tokens = line_tokens(digits + "\n")
    assert tokens == [Token.value_token(int(digits)), CONTROL_TOKENS['EOLN']]


def test_digit_run_wraps_like_fixed_width_integer():
    tokens = line_tokens("2147483648\n")
    assert tokens[0].get_value() == -2147483648


@pytest.mark.parametrize("text,expected", [
    ("q\n", TokenType.QUIT),
    ("Q\n", TokenType.QUIT),
    ("?\n", TokenType.HELP),
    ("   \n", TokenType.EOLN),
])
def test_control_characters(text, expected):
    reader, _ = make_reader(text)
    assert reader.next_token().get_type() == expected


def test_unrecognized_symbol_is_reported():
    reader, out = make_reader("3 + abc$ 4\n")
    assert reader.next_token() == Token.value_token(3)
    assert reader.next_token() == Token.operator_token('+')
    assert reader.next_token().is_type(TokenType.ERROR)
    assert out.getvalue() == 'Error: Unrecognized symbol "abc$"\n'
    # 扫描位置越过无法识别的符号
    assert reader.next_token() == Token.value_token(4)


def test_end_of_input():
    reader, _ = make_reader("1\n")
    assert reader.next_token() == Token.value_token(1)
    assert reader.next_token().is_type(TokenType.EOLN)
    assert not reader.at_eof
    assert reader.next_token().is_type(TokenType.EOFILE)
    assert reader.at_eof


def test_reads_lines_on_demand():
    reader, _ = make_reader("1\n2\n")
    assert reader.next_token().get_value() == 1
    assert reader.next_token().is_type(TokenType.EOLN)
    assert reader.next_token().get_value() == 2


def test_clear_to_eoln_discards_rest_of_line():
    reader, _ = make_reader("? 1 + 2\n5\n")
    assert reader.next_token().is_type(TokenType.HELP)
    reader.clear_to_eoln()
    assert reader.next_token().get_value() == 5


def test_accepts_any_iterable_of_lines():
    reader = TokenReader(["8 / 2\n"], Console(io.StringIO()))
    assert [t.get_type() for t in reader] == [
        TokenType.VALUE, TokenType.OPERATOR, TokenType.VALUE, TokenType.EOLN
    ]
