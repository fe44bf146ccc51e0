"""core/lexer.py - 按需从输入行中切分Token"""
import logging
import sys

from config.config import LEXER_CONFIG, MESSAGES
from core.operators import wrap_integer
from core.token_system import Token, TokenType, CONTROL_TOKENS
from utils.console import Console

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class TokenReader:
    """
    逐行读取输入，每次调用 next_token() 返回一个Token。

    Args:
        input_stream: 可迭代的文本行来源（默认 sys.stdin）
        console: 输出端，用于报告无法识别的符号
    """

    def __init__(self, input_stream=None, console=None):
        self._lines = iter(input_stream if input_stream is not None else sys.stdin)
        self.console = console if console is not None else Console()
        self.line = ""
        self.pos = 0
        self.length = 0
        self.need_line = True
        self.at_eof = False

    def clear_to_eoln(self):
        """强制下一次 next_token() 丢弃本行剩余内容并读入新行"""
        self.need_line = True

    def _read_line(self):
        line = next(self._lines, None)
        if line is None:
            return False
        self.line = line
        self.length = len(line)
        self.pos = 0
        self.need_line = False
        return True

    def next_token(self):
        if self.need_line:
            if not self._read_line():
                logger.info("End of input reached while reading a line")
                self.at_eof = True
                return CONTROL_TOKENS['EOFILE']

        # 跳过空白
        while self.pos < self.length and self.line[self.pos].isspace():
            self.pos += 1

        # 行尾
        if self.pos >= self.length:
            self.need_line = True
            return CONTROL_TOKENS['EOLN']

        ch = self.line[self.pos]
        self.pos += 1

        if ch in LEXER_CONFIG["quit_chars"]:
            return CONTROL_TOKENS['QUIT']
        if ch == LEXER_CONFIG["help_char"]:
            return CONTROL_TOKENS['HELP']
        if ch in LEXER_CONFIG["operators"]:
            return Token.operator_token(ch)

        if ch in DIGITS:
            number = int(ch)
            while self.pos < self.length and self.line[self.pos] in DIGITS:
                # 不做溢出检查，按定宽整数回绕
                number = wrap_integer(number * 10 + int(self.line[self.pos]))
                self.pos += 1
            return Token.value_token(number)

        # 无法识别：吞掉连续的非空白字符并报告
        start = self.pos - 1
        while self.pos < self.length and not self.line[self.pos].isspace():
            self.pos += 1
        symbol = self.line[start:self.pos]
        self.console.print(MESSAGES["unrecognized_symbol"].format(symbol=symbol))
        logger.debug(f"Unrecognized symbol {symbol!r} at column {start}")
        return CONTROL_TOKENS['ERROR']

    def __iter__(self):
        """逐个产生Token直到行尾（包含EOLN）或输入结束"""
        while True:
            token = self.next_token()
            yield token
            if token.get_type() in (TokenType.EOLN, TokenType.EOFILE):
                return
