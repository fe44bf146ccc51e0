"""Token 测试"""
import pytest

from core.token_system import Token, TokenType, CONTROL_TOKENS, OP_ERROR, VALUE_ERROR


def test_operator_token():
    tok = Token.operator_token('+')
    assert tok.is_type(TokenType.OPERATOR)
    assert tok.is_operator('+')
    assert not tok.is_operator('-')
    assert tok.get_operator() == '+'
    assert tok.get_value() == VALUE_ERROR


def test_value_token():
    tok = Token.value_token(42)
    assert tok.get_type() == TokenType.VALUE
    assert tok.get_value() == 42
    assert tok.get_operator() == OP_ERROR
    assert not tok.is_operator('$')


def test_sentinels():
    assert OP_ERROR == '$'
    assert VALUE_ERROR == -999


@pytest.mark.parametrize("name", ['ERROR', 'EOLN', 'QUIT', 'HELP', 'EOFILE'])
def test_control_tokens_return_sentinels(name):
    tok = CONTROL_TOKENS[name]
    assert tok.get_type() == TokenType[name]
    assert tok.get_operator() == OP_ERROR
    assert tok.get_value() == VALUE_ERROR


def test_token_is_immutable():
    tok = Token.value_token(1)
    with pytest.raises(AttributeError):
        tok._value = 2
    with pytest.raises(AttributeError):
        tok.extra = 1


def test_equality_and_repr():
    assert Token.value_token(3) == Token.value_token(3)
    assert Token.value_token(3) != Token.operator_token('+')
    assert Token(TokenType.EOLN) == CONTROL_TOKENS['EOLN']
    assert repr(Token.operator_token('*')) == "Token(OPERATOR, '*')"
    assert repr(Token.value_token(7)) == "Token(VALUE, 7)"
    assert repr(CONTROL_TOKENS['QUIT']) == "Token(QUIT)"
