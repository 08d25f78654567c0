"""
标量断言

失败时构造 FailureDetail 并抛出 UnitTestFailure, 当前测试用例就此中止。

基本使用:
    from numassert import assert_equal, assert_almost_equal

    assert_equal(len(out), 3, __file__, 42)
    assert_almost_equal(y, 0.333333, a_tol=1e-6)
"""

from typing import Any, Callable, Optional, Tuple, Type, Union

from numassert.core.constants import UNKNOWN_FILENAME, UNKNOWN_LINENO

from .exceptions import UnitTestFailure
from .predicate import AlmostEqualTo, equal, ordered_ge, ordered_le
from .report import render_failure
from .types import FailureDetail, SourceLocation

ExceptionKind = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def type_name(value: Any) -> str:
    """值的类型名, 用于失败消息中的 [type='...']"""
    return type(value).__name__


def _fail(message: str, a: Any, filename: str, lineno: int):
    detail = FailureDetail(
        location=SourceLocation(filename, lineno),
        message=message,
        type_name=type_name(a),
    )
    raise UnitTestFailure(render_failure(detail), detail)


def assert_equal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """
    断言 a == b

    Raises:
        UnitTestFailure: 消息包含两个值及 a 的类型名
    """
    if not equal(a, b):
        _fail(f"values are not equal: {a} {b}", a, filename, lineno)


def assert_equal_quiet(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """断言 a == b, 失败消息不输出值 (用于无法转成文本的类型)"""
    if not equal(a, b):
        _fail("values are not equal.", a, filename, lineno)


def assert_lequal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """断言 a <= b"""
    if not ordered_le(a, b):
        _fail(f"{a} is greater than {b}", a, filename, lineno)


def assert_gequal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """断言 a >= b"""
    if not ordered_ge(a, b):
        _fail(f"{a} is less than {b}", a, filename, lineno)


def assert_almost_equal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
    a_tol: Optional[float] = None,
    r_tol: Optional[float] = None,
):
    """
    断言 a, b 近似相等

    判定条件: |a - b| <= r_tol * (|a| + |b|) + a_tol

    Args:
        a: 值 a
        b: 值 b
        filename: 源文件名
        lineno: 行号
        a_tol: 绝对容差, None 取全局配置
        r_tol: 相对容差, None 取全局配置

    Raises:
        UnitTestFailure: 消息中的值按 double 显示
        ConfigError: 容差非法
    """
    pred = AlmostEqualTo(a_tol, r_tol)
    if not pred(a, b):
        _fail(
            f"values are not approximately equal: {float(a)} {float(b)}",
            a, filename, lineno,
        )


def _kind_name(expected: ExceptionKind) -> str:
    if isinstance(expected, tuple):
        return " or ".join(k.__name__ for k in expected)
    return expected.__name__


def _did_not_throw(expected: ExceptionKind, location: SourceLocation) -> UnitTestFailure:
    detail = FailureDetail(location=location, message=f"did not throw {_kind_name(expected)}")
    return UnitTestFailure(f"{location} {detail.message}", detail)


class _ThrowsContext:
    """assert_throws 的上下文管理器形式"""

    def __init__(self, expected: ExceptionKind, location: SourceLocation):
        self.expected = expected
        self.location = location
        self.exception: Optional[BaseException] = None

    def __enter__(self) -> "_ThrowsContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            raise _did_not_throw(self.expected, self.location)
        if issubclass(exc_type, self.expected):
            self.exception = exc
            return True
        # 其他类型的异常原样向上传播
        return False


def assert_throws(
    expected: ExceptionKind,
    func: Optional[Callable[..., Any]] = None,
    *args: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
    **kwargs: Any,
):
    """
    断言表达式抛出指定类型的异常

    只捕获 "未抛出" 这一种情况: 抛出其他类型的异常时原样传播, 不转成断言失败。

    使用示例:
        assert_throws(ZeroDivisionError, lambda: 1 / 0)

        with assert_throws(KeyError):
            {}["missing"]

    Args:
        expected: 期望的异常类型 (或类型元组)
        func: 待执行的可调用对象; 省略时返回上下文管理器
        *args: 传给 func 的位置参数
        filename: 源文件名
        lineno: 行号
        **kwargs: 传给 func 的关键字参数

    Returns:
        callable 形式返回捕获到的异常; 上下文管理器形式返回 _ThrowsContext

    Raises:
        UnitTestFailure: func 没有抛出异常
    """
    location = SourceLocation(filename, lineno)
    if func is None:
        return _ThrowsContext(expected, location)

    try:
        func(*args, **kwargs)
    except expected as exc:
        return exc
    raise _did_not_throw(expected, location)
