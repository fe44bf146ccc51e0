"""中缀表达式求值器 - 双栈算符优先算法"""
import logging
from enum import Enum

from config.config import INTEGER_CONFIG, MESSAGES
from core.growable_array import GrowableArray
from core.operators import Operators, binds_at_least_as_tight
from core.token_system import TokenType
from utils.console import Console

logger = logging.getLogger(__name__)


class EvalError(Enum):
    """单个表达式求值失败的种类，值为要输出的信息键（None表示静默）"""
    STACK_UNDERFLOW = "too_many_operators"
    UNMATCHED_CLOSE_PAREN = "missing_opening_paren"
    UNMATCHED_OPEN_PAREN = "missing_closing_paren"
    OPERAND_OPERATOR_MISMATCH = "not_enough_operators"
    DIVIDE_BY_ZERO = "divide_by_zero"
    EMPTY_EXPRESSION = "empty_expression"
    ABORTED = None  # 表达式中途遇到 ERROR/QUIT/HELP/EOFILE

    @property
    def message(self):
        return MESSAGES[self.value] if self.value is not None else None


class EvalResult:
    """求值结果：value 与 error 二者恰有其一"""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"EvalResult(value={self.value})"
        return f"EvalResult(error={self.error.name})"


class InfixEvaluator:
    """
    从TokenReader逐个拉取Token，用值栈和运算符栈求值一行中缀表达式。

    两个栈只在一次 evaluate() 内存在，表达式之间不共享状态。
    """

    def __init__(self, console=None):
        self.console = console if console is not None else Console()

    @staticmethod
    def pop_and_fold(value_stack, operator_stack):
        """
        弹出一个运算符和两个操作数（先弹出的是右操作数），计算后压回值栈。

        Returns:
            None 表示成功，否则返回 EvalError
        """
        if not operator_stack.empty() and operator_stack.back() == '(':
            return EvalError.UNMATCHED_OPEN_PAREN
        if operator_stack.empty() or value_stack.size() < 2:
            return EvalError.STACK_UNDERFLOW

        op = operator_stack.pop_back()
        rhs = value_stack.pop_back()
        lhs = value_stack.pop_back()

        if op == '/' and rhs == 0:
            return EvalError.DIVIDE_BY_ZERO

        value_stack.push_back(Operators.apply(op, lhs, rhs))
        return None

    def evaluate(self, input_token, token_reader):
        """
        Args:
            input_token: 已读出的第一个Token
            token_reader: 继续提供后续Token的TokenReader
        Returns:
            EvalResult；结果或错误信息同时输出到console
        """
        result = self._evaluate_impl(input_token, token_reader)

        if result.ok:
            self.console.print(MESSAGES["result"].format(value=result.value))
        elif result.error.message is not None:
            self.console.print(result.error.message)
        return result

    def _evaluate_impl(self, input_token, token_reader):
        value_stack = GrowableArray(dtype=INTEGER_CONFIG["dtype"])
        operator_stack = GrowableArray(dtype=INTEGER_CONFIG["operator_dtype"])

        while not input_token.is_type(TokenType.EOLN):
            token_type = input_token.get_type()

            if token_type == TokenType.VALUE:
                val = input_token.get_value()
                logger.debug(f"Val: {val}")
                value_stack.push_back(val)

            elif token_type == TokenType.OPERATOR:
                op = input_token.get_operator()
                logger.debug(f"OP: {op}")
                error = self._handle_operator(op, value_stack, operator_stack)
                if error is not None:
                    return EvalResult(error=error)

            else:
                logger.debug(f"Expression aborted by {input_token!r}")
                return EvalResult(error=EvalError.ABORTED)

            input_token = token_reader.next_token()

        # 行尾：清空运算符栈
        while not operator_stack.empty():
            error = self.pop_and_fold(value_stack, operator_stack)
            if error is not None:
                return EvalResult(error=error)

        if value_stack.empty():
            return EvalResult(error=EvalError.EMPTY_EXPRESSION)

        result = value_stack.pop_back()
        if not value_stack.empty():
            logger.debug(f"Leftover operands: {value_stack!r}")
            return EvalResult(error=EvalError.OPERAND_OPERATOR_MISMATCH)

        return EvalResult(value=int(result))

    def _handle_operator(self, op, value_stack, operator_stack):
        """处理一个运算符Token，返回 None 或 EvalError"""
        if op == '(':
            operator_stack.push_back(op)
            return None

        if op == ')':
            while not operator_stack.empty() and operator_stack.back() != '(':
                error = self.pop_and_fold(value_stack, operator_stack)
                if error is not None:
                    return error
            if operator_stack.empty():
                return EvalError.UNMATCHED_CLOSE_PAREN
            operator_stack.pop_back()
            return None

        # + - * /：先折叠栈顶优先级不低于自己的运算符
        while not operator_stack.empty() and binds_at_least_as_tight(operator_stack.back(), op):
            error = self.pop_and_fold(value_stack, operator_stack)
            if error is not None:
                return error
        operator_stack.push_back(op)
        return None
