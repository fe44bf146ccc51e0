"""core/growable_array.py - 基于连续缓冲区的动态数组"""
import logging

import numpy as np

from config.config import ARRAY_CONFIG

logger = logging.getLogger(__name__)


class EmptyContainerError(RuntimeError):
    """对空容器执行 pop_back/back/front 时抛出"""


class IndexOutOfRangeError(IndexError):
    """at() 越界时抛出"""


class GrowableArray:
    """
    连续存储、容量翻倍扩容的动态数组。

    缓冲区是一个numpy数组：[0, size) 是有效元素，[size, capacity) 是备用空间。
    同一个类按 dtype 实例化为整数栈（int32）、字符栈（U1）或通用对象数组（object）。
    """

    def __init__(self, capacity=None, dtype=object):
        self.dtype = np.dtype(dtype)
        self._init(ARRAY_CONFIG["default_capacity"] if capacity is None else capacity)

    def _init(self, capacity):
        """分配新的缓冲区并清空"""
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._buffer = np.empty(capacity, dtype=self.dtype)
        self._size = 0

    def _grow(self):
        """容量翻倍，保留已有元素"""
        new_capacity = len(self._buffer) * ARRAY_CONFIG["growth_factor"]
        new_buffer = np.empty(new_capacity, dtype=self.dtype)
        new_buffer[:self._size] = self._buffer[:self._size]
        self._buffer = new_buffer
        logger.debug(f"GrowableArray grown to capacity {new_capacity}")

    # ================== 复制与移动 ==================

    def copy(self):
        """深拷贝：新缓冲区，逐元素复制，容量保持一致"""
        other = GrowableArray(capacity=self.capacity(), dtype=self.dtype)
        other._buffer[:self._size] = self._buffer[:self._size]
        other._size = self._size
        return other

    def __copy__(self):
        return self.copy()

    def move(self):
        """转移缓冲区所有权到新数组，自身重置为默认空状态"""
        other = GrowableArray(dtype=self.dtype)
        other._buffer, other._size = self._buffer, self._size
        self._init(ARRAY_CONFIG["default_capacity"])
        return other

    def assign(self, other):
        """拷贝赋值"""
        if other is self:
            return self
        self.dtype = other.dtype
        self._buffer = other._buffer.copy()
        self._size = other._size
        return self

    def move_from(self, other):
        """移动赋值：接管 other 的缓冲区，other 重置为空"""
        if other is self:
            return self
        self.dtype = other.dtype
        self._buffer, self._size = other._buffer, other._size
        other._init(ARRAY_CONFIG["default_capacity"])
        return self

    def reset(self):
        """销毁所有元素，恢复默认容量"""
        self._init(ARRAY_CONFIG["default_capacity"])

    # ================== 尾部操作 ==================

    def push_back(self, value):
        if self._size == len(self._buffer):
            self._grow()
        self._buffer[self._size] = value
        self._size += 1

    def pop_back(self):
        if self._size == 0:
            raise EmptyContainerError("Container is empty")
        self._size -= 1
        value = self._buffer[self._size]
        if self.dtype == object:
            # 释放对象引用
            self._buffer[self._size] = None
        return value

    def back(self):
        if self._size == 0:
            raise EmptyContainerError("Container is empty")
        return self._buffer[self._size - 1]

    def front(self):
        if self._size == 0:
            raise EmptyContainerError("Container is empty")
        return self._buffer[0]

    # ================== 下标访问 ==================

    def at(self, idx):
        """带边界检查的下标访问"""
        if 0 <= idx < self._size:
            return self._buffer[idx]
        raise IndexOutOfRangeError("Index is out of bounds.")

    def __getitem__(self, idx):
        # 不检查 size，只在确定下标合法时使用
        return self._buffer[idx]

    def __setitem__(self, idx, value):
        self._buffer[idx] = value

    # ================== 状态查询 ==================

    def empty(self):
        return self._size == 0

    def size(self):
        return self._size

    def capacity(self):
        return len(self._buffer)

    def __len__(self):
        return self._size

    def __iter__(self):
        for i in range(self._size):
            yield self._buffer[i]

    def __eq__(self, other):
        if not isinstance(other, GrowableArray):
            return NotImplemented
        return (self._size == other._size
                and all(a == b for a, b in zip(self, other)))

    def __repr__(self):
        return '[' + ', '.join(str(v) for v in self) + ']'
