"""
序列断言

逐元素比对两个序列, 统计全部不一致位置, 报告中最多列出 max_output_lines 行。

两种入口:
- assert_equal_ranges / assert_almost_equal_ranges:
    迭代器形式, 以第一个序列的长度为准单次遍历; 调用方保证第二个序列不短于第一个
- assert_array_equal / assert_array_almost_equal:
    容器形式, 先比较长度 (不一致直接抛 UnitTestError), 再经适配层转为 host 序列
"""

from typing import Any, Callable, Iterable, Optional

from numassert.core.config import get_config
from numassert.core.constants import UNKNOWN_FILENAME, UNKNOWN_LINENO

from .adapter import container_size, to_host_sequence
from .exceptions import UnitTestError, UnitTestFailure
from .predicate import AlmostEqualTo, EqualTo
from .report import render_failure
from .types import FailureDetail, MismatchRow, SourceLocation

BinaryPredicate = Callable[[Any, Any], bool]

_MISSING = object()


def assert_equal_ranges(
    seq_a: Iterable,
    seq_b: Iterable,
    op: Optional[BinaryPredicate] = None,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """
    逐元素比对两个序列

    Args:
        seq_a: 序列 a, 决定比对长度
        seq_b: 序列 b, 多出的尾部元素被忽略
        op: 逐元素谓词, None 表示值相等
        filename: 源文件名
        lineno: 行号

    Raises:
        UnitTestFailure: 存在不一致元素
        UnitTestError: seq_b 比 seq_a 短
    """
    if op is None:
        op = EqualTo()
    limit = get_config().max_output_lines
    location = SourceLocation(filename, lineno)

    detail = FailureDetail(
        location=location,
        type_name=getattr(seq_a, "type_name", None) or "",
        is_sequence=True,
    )

    iter_b = iter(seq_b)
    count = 0
    for x in seq_a:
        y = next(iter_b, _MISSING)
        if y is _MISSING:
            raise UnitTestError(
                f"{location} Second sequence is shorter than the first ({count} elements)"
            )
        if not detail.type_name:
            detail.type_name = type(x).__name__

        if not op(x, y):
            detail.mismatch_count += 1
            if detail.mismatch_count <= limit:
                detail.rows.append(MismatchRow(count, x, y))
        count += 1

    detail.total_compared = count
    if detail.mismatch_count > 0:
        detail.type_name = detail.type_name or "unknown"
        detail.truncated = detail.mismatch_count > limit
        raise UnitTestFailure(render_failure(detail), detail)


def assert_almost_equal_ranges(
    seq_a: Iterable,
    seq_b: Iterable,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
    a_tol: Optional[float] = None,
    r_tol: Optional[float] = None,
):
    """逐元素近似比对, 容差为 None 时取全局配置"""
    assert_equal_ranges(seq_a, seq_b, AlmostEqualTo(a_tol, r_tol), filename, lineno)


def _check_sizes(a: Any, b: Any, location: SourceLocation):
    size_a, size_b = container_size(a), container_size(b)
    if size_a != size_b:
        raise UnitTestError(
            f"{location} Sequences have different sizes ({size_a} vs {size_b})"
        )


def assert_array_equal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
):
    """
    比对两个有长度的容器

    先比较长度, 不一致时在任何逐元素比对之前抛出 UnitTestError。

    Raises:
        UnitTestError: 长度不同
        UnitTestFailure: 存在不一致元素
    """
    _check_sizes(a, b, SourceLocation(filename, lineno))
    assert_equal_ranges(to_host_sequence(a), to_host_sequence(b), None, filename, lineno)


def assert_array_almost_equal(
    a: Any,
    b: Any,
    filename: str = UNKNOWN_FILENAME,
    lineno: int = UNKNOWN_LINENO,
    a_tol: Optional[float] = None,
    r_tol: Optional[float] = None,
):
    """
    近似比对两个有长度的容器

    Args:
        a: 容器 a
        b: 容器 b
        filename: 源文件名
        lineno: 行号
        a_tol: 绝对容差
        r_tol: 相对容差

    Raises:
        UnitTestError: 长度不同
        UnitTestFailure: 存在超出容差的元素
        ConfigError: 容差非法
    """
    _check_sizes(a, b, SourceLocation(filename, lineno))
    assert_almost_equal_ranges(
        to_host_sequence(a), to_host_sequence(b), filename, lineno, a_tol, r_tol
    )
