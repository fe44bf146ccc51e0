"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    ERROR = "error"  # 无法识别的符号
    OPERATOR = "operator"  # + - * / ( )
    VALUE = "value"  # 整数字面量
    EOLN = "eoln"  # 行尾
    QUIT = "quit"  # q / Q
    HELP = "help"  # ?
    EOFILE = "eofile"  # 输入结束


# 访问器类型不匹配时返回的哨兵值（公开约定，调用方应先检查类型）
OP_ERROR = '$'
VALUE_ERROR = -999


class Token:
    """
    不可变的词法单元。

    只有 OPERATOR 类型的 operator 有意义，只有 VALUE 类型的 value 有意义；
    在错误类型上调用 get_operator()/get_value() 返回 OP_ERROR/VALUE_ERROR 而不是抛异常。
    """
    __slots__ = ('_type', '_operator', '_value')

    def __init__(self, token_type, operator=OP_ERROR, value=VALUE_ERROR):
        object.__setattr__(self, '_type', token_type)
        object.__setattr__(self, '_operator', operator)
        object.__setattr__(self, '_value', value)

    @classmethod
    def operator_token(cls, op):
        return cls(TokenType.OPERATOR, operator=op)

    @classmethod
    def value_token(cls, value):
        return cls(TokenType.VALUE, value=value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def is_type(self, token_type):
        """当前Token是否为给定类型"""
        return self._type == token_type

    def get_type(self):
        return self._type

    def is_operator(self, op):
        """是否为包含给定运算符字符的OPERATOR"""
        return self._type == TokenType.OPERATOR and self._operator == op

    def get_operator(self):
        return self._operator if self._type == TokenType.OPERATOR else OP_ERROR

    def get_value(self):
        return self._value if self._type == TokenType.VALUE else VALUE_ERROR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self._type, self.get_operator(), self.get_value()) == \
            (other._type, other.get_operator(), other.get_value())

    def __hash__(self):
        return hash((self._type, self.get_operator(), self.get_value()))

    def __repr__(self):
        if self._type == TokenType.OPERATOR:
            return f"Token(OPERATOR, '{self._operator}')"
        if self._type == TokenType.VALUE:
            return f"Token(VALUE, {self._value})"
        return f"Token({self._type.name})"


# 控制标记共享实例
CONTROL_TOKENS = {
    'ERROR': Token(TokenType.ERROR),
    'EOLN': Token(TokenType.EOLN),
    'QUIT': Token(TokenType.QUIT),
    'HELP': Token(TokenType.HELP),
    'EOFILE': Token(TokenType.EOFILE),
}
