"""utils/console.py - 面向用户的输出"""
import sys


class Console:
    """包装文本流的输出端：提示符、结果、错误信息都经由这里输出"""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text):
        """原样输出，不追加换行（用于提示符）"""
        self.stream.write(text)
        self.stream.flush()

    def print(self, text=""):
        self.stream.write(f"{text}\n")
        self.stream.flush()
