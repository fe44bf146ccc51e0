"""核心模块 - 动态数组、Token系统、词法分析器和中缀求值器"""
from .growable_array import GrowableArray, EmptyContainerError, IndexOutOfRangeError
from .token_system import TokenType, Token, CONTROL_TOKENS, OP_ERROR, VALUE_ERROR
from .operators import Operators, wrap_integer
from .lexer import TokenReader
from .infix_evaluator import InfixEvaluator, EvalError, EvalResult

__all__ = [
    'GrowableArray', 'EmptyContainerError', 'IndexOutOfRangeError',
    'TokenType', 'Token', 'CONTROL_TOKENS', 'OP_ERROR', 'VALUE_ERROR',
    'Operators', 'wrap_integer', 'TokenReader',
    'InfixEvaluator', 'EvalError', 'EvalResult'
]
