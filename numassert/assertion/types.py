"""
断言结果类型定义

失败信号判定矩阵 (供外部测试收集器使用):
    抛出的异常               | 判定结果
    -------------------------|---------------
    无                       | PASS
    UnitTestKnownFailure     | KNOWN_FAILURE
    UnitTestFailure          | FAILURE
    其他 (含 UnitTestError)  | ERROR
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from numassert.core.constants import UNKNOWN_FILENAME, UNKNOWN_LINENO


class ComparisonOutcome(Enum):
    """单次比对结果"""

    PASS = "PASS"
    FAIL = "FAIL"


class TestOutcome(Enum):
    """测试用例结果分类"""

    __test__ = False  # 避免被 pytest 当作测试类收集

    PASS = "PASS"
    FAILURE = "FAILURE"  # 断言失败
    ERROR = "ERROR"  # 结构性错误或其他异常
    KNOWN_FAILURE = "KNOWN_FAILURE"  # 已知失败, 不算回归


@dataclass(frozen=True)
class SourceLocation:
    """调用方源码位置, 核心只负责透传"""

    filename: str = UNKNOWN_FILENAME
    lineno: int = UNKNOWN_LINENO

    def __str__(self) -> str:
        return f"[{self.filename}:{self.lineno}]"

    @classmethod
    def caller(cls, depth: int = 1) -> "SourceLocation":
        """
        取调用栈中第 depth 层调用者的位置

        Args:
            depth: 1 表示调用 caller() 的函数的调用者

        Returns:
            SourceLocation, 栈深不足时返回未知位置
        """
        frame = inspect.currentframe()
        try:
            for _ in range(depth + 1):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                return cls()
            return cls(frame.f_code.co_filename, frame.f_lineno)
        finally:
            del frame


@dataclass
class MismatchRow:
    """一条不一致记录"""

    index: int
    value_a: Any
    value_b: Any


@dataclass
class FailureDetail:
    """
    失败详情

    标量比对只填 location / message / type_name;
    序列比对额外填写不一致行及统计。
    """

    location: SourceLocation = field(default_factory=SourceLocation)
    message: str = ""
    type_name: str = "unknown"

    # 序列比对
    rows: List[MismatchRow] = field(default_factory=list)
    mismatch_count: int = 0
    total_compared: int = 0
    truncated: bool = False
    is_sequence: bool = False

    @property
    def outcome(self) -> ComparisonOutcome:
        """有不一致或标量失败即为 FAIL"""
        if self.is_sequence and self.mismatch_count == 0:
            return ComparisonOutcome.PASS
        return ComparisonOutcome.FAIL
