"""core/operators.py"""
import logging

import numpy as np

from config.config import INTEGER_CONFIG, PRECEDENCE

INTEGER_DTYPE = np.dtype(INTEGER_CONFIG["dtype"])
MAX_VALUE = int(np.iinfo(INTEGER_DTYPE).max)
MIN_VALUE = int(np.iinfo(INTEGER_DTYPE).min)

logger = logging.getLogger(__name__)


def wrap_integer(value):
    """把任意整数截断为定宽整数（二进制补码回绕，与C语言int一致）"""
    return np.array(int(value), dtype=np.int64).astype(INTEGER_DTYPE).item()


class Operators:
    """所有二元运算符的静态方法集合（定宽整数语义）"""

    @staticmethod
    def add(lhs, rhs):
        """加法"""
        return wrap_integer(int(lhs) + int(rhs))

    @staticmethod
    def sub(lhs, rhs):
        """减法"""
        return wrap_integer(int(lhs) - int(rhs))

    @staticmethod
    def mul(lhs, rhs):
        """乘法"""
        return wrap_integer(int(lhs) * int(rhs))

    @staticmethod
    def div(lhs, rhs):
        """向零截断的整数除法；除数为0时抛出 ZeroDivisionError"""
        lhs, rhs = int(lhs), int(rhs)
        if rhs == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(lhs) // abs(rhs)
        if (lhs < 0) != (rhs < 0):
            quotient = -quotient
        # MIN_VALUE / -1 溢出后回绕为 MIN_VALUE
        return wrap_integer(quotient)

    @staticmethod
    def apply(op, lhs, rhs):
        """按运算符字符分派"""
        method = BINARY_OPERATORS.get(op)
        if method is None:
            raise ValueError(f"Unknown operator: {op!r}")
        return method(lhs, rhs)


BINARY_OPERATORS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}


def binds_at_least_as_tight(stack_top, incoming):
    """
    栈顶运算符的优先级是否不低于新运算符（左结合：相等时也要先折叠）。
    '(' 不在优先级表中，永远返回False，起到屏障作用。
    """
    if stack_top not in PRECEDENCE:
        return False
    return PRECEDENCE[stack_top] >= PRECEDENCE[incoming]
