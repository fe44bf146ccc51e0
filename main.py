"""主程序入口 - 交互式中缀表达式求值"""
import argparse
import logging
import sys

from config.config import *
from core import TokenReader, InfixEvaluator, TokenType
from utils import Console

logger = logging.getLogger(__name__)


def print_commands(console):
    console.print(MESSAGES["help"])


def run_repl(input_stream=None, output_stream=None, debug=False):
    """
    读取-求值-输出循环

    Args:
        input_stream: 输入行来源（默认 sys.stdin）
        output_stream: 输出文本流（默认 sys.stdout）
        debug: 是否输出调试信息
    Returns:
        退出状态码：q/Q 为 quit_exit_status，输入结束为 eof_exit_status
    """
    console = Console(output_stream)
    if debug:
        console.print(MESSAGES["debug_on"])

    console.print(REPL_CONFIG["banner"])

    reader = TokenReader(input_stream, console)
    evaluator = InfixEvaluator(console)

    while True:
        console.write(REPL_CONFIG["prompt"])

        # 每个提示符都从新的一行开始，上一行未读完的部分直接丢弃
        reader.clear_to_eoln()
        input_token = reader.next_token()
        token_type = input_token.get_type()

        if token_type == TokenType.QUIT:
            console.print(MESSAGES["quitting"])
            return REPL_CONFIG["quit_exit_status"]
        elif token_type == TokenType.EOFILE:
            console.print()
            return REPL_CONFIG["eof_exit_status"]
        elif token_type == TokenType.HELP:
            print_commands(console)
        elif token_type == TokenType.ERROR:
            console.print(MESSAGES["invalid_input"])
        elif token_type == TokenType.EOLN:
            console.print(MESSAGES["blank_line"])
        else:
            result = evaluator.evaluate(input_token, reader)
            logger.debug(f"Evaluation finished: {result!r}")
            if reader.at_eof:
                return REPL_CONFIG["eof_exit_status"]


def main(args):
    validate_config()

    level = LOGGING_CONFIG["debug_level"] if args.debug else args.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOGGING_CONFIG["format"]
    )

    try:
        return run_repl(debug=args.debug)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return REPL_CONFIG["eof_exit_status"]


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive integer expression evaluator")

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Trace every value and operator seen during evaluation"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level when --debug is not given"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
