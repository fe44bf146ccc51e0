"""配置文件"""

# 动态数组参数
ARRAY_CONFIG = {
    "default_capacity": 2,  # 初始容量
    "growth_factor": 2,  # 扩容时容量翻倍
}

# 整数运算参数（模拟C语言int的定宽溢出）
INTEGER_CONFIG = {
    "dtype": "int32",
    "operator_dtype": "U1",  # 运算符栈：单字符
}

# 词法分析参数
LEXER_CONFIG = {
    "operators": "+-*/()",
    "quit_chars": "qQ",
    "help_char": "?",
}

# 运算符优先级（数值越大优先级越高，'(' 不参与比较）
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}

# REPL参数
REPL_CONFIG = {
    "banner": "Starting Expression Evaluation Program",
    "prompt": "\nEnter Expression: ",
    "quit_exit_status": 1,  # q/Q 退出时的特殊状态码
    "eof_exit_status": 0,
}

# 面向用户的输出文本
MESSAGES = {
    "result": "Result: {value}",
    "unrecognized_symbol": 'Error: Unrecognized symbol "{symbol}"',
    "too_many_operators": "Error: Too many operators.",
    "not_enough_operators": "Error: Not enough operators.",
    "missing_opening_paren": "Error: missing an opening parenthesis",
    "missing_closing_paren": "Error: missing a closing parenthesis",
    "divide_by_zero": "Error: Division by zero.",
    "empty_expression": "Error: Empty expression.",
    "invalid_input": "Invalid Input - For a list of valid commands, type ?",
    "blank_line": "Blank Line - Do Nothing",
    "quitting": "Quitting Program",
    "debug_on": "Debugging mode ON.",
    "help": (
        "The commands for this program are:\n\n"
        "q - to quit the program\n"
        "? - to list the accepted commands\n"
        "or any infix mathematical expression using operators of (), *, /, +, -"
    ),
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "debug_level": "DEBUG",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ARRAY_CONFIG["default_capacity"] >= 1, "初始容量至少为1"
    assert ARRAY_CONFIG["growth_factor"] == 2, "扩容策略要求容量翻倍"
    assert set(PRECEDENCE) <= set(LEXER_CONFIG["operators"]), "优先级表中的运算符必须可被词法分析识别"
    assert '(' not in PRECEDENCE and ')' not in PRECEDENCE, "括号不参与优先级比较"
    assert REPL_CONFIG["quit_exit_status"] != REPL_CONFIG["eof_exit_status"], "退出状态码必须可区分"
