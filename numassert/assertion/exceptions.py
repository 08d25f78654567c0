"""
断言异常

三类信号均向上抛出, 由外部测试收集器捕获并记录:
1. UnitTestFailure       断言失败
2. UnitTestError         结构性错误 (如序列长度不同), 在逐元素比对前抛出
3. UnitTestKnownFailure  调用方主动标记的已知失败
"""

from typing import Optional

from numassert.core.constants import UNKNOWN_FILENAME, UNKNOWN_LINENO

from .types import FailureDetail, SourceLocation, TestOutcome


class UnitTestException(Exception):
    """断言异常基类"""

    def __init__(self, message: str = "", detail: Optional[FailureDetail] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class UnitTestFailure(UnitTestException, AssertionError):
    """断言失败 (pytest 按普通断言失败报告)"""


class UnitTestError(UnitTestException):
    """结构性错误, 核心无法继续比对"""


class UnitTestKnownFailure(UnitTestException):
    """已知失败标记, 不得与断言失败混为一谈"""


def known_failure(
    message: str = "",
    filename: Optional[str] = None,
    lineno: Optional[int] = None,
):
    """
    抛出已知失败标记

    未给出位置时自动取调用者所在的文件与行号。

    Args:
        message: 附加说明
        filename: 源文件名
        lineno: 行号

    Raises:
        UnitTestKnownFailure
    """
    if filename is None and lineno is None:
        loc = SourceLocation.caller()
    else:
        loc = SourceLocation(
            filename if filename is not None else UNKNOWN_FILENAME,
            lineno if lineno is not None else UNKNOWN_LINENO,
        )
    text = f"{loc}" if not message else f"{loc} {message}"
    raise UnitTestKnownFailure(text, FailureDetail(location=loc, message=message))


def outcome_of(exc: Optional[BaseException]) -> TestOutcome:
    """
    根据测试用例抛出的异常判定结果

    Args:
        exc: 捕获到的异常, 未抛出时传 None

    Returns:
        TestOutcome
    """
    if exc is None:
        return TestOutcome.PASS
    if isinstance(exc, UnitTestKnownFailure):
        return TestOutcome.KNOWN_FAILURE
    if isinstance(exc, UnitTestError):
        return TestOutcome.ERROR
    if isinstance(exc, AssertionError):
        return TestOutcome.FAILURE
    return TestOutcome.ERROR
