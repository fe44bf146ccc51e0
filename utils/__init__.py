"""工具模块"""
from .console import Console

__all__ = ['Console']
