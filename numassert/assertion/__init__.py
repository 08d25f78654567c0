"""
断言模块

提供标量断言、近似相等断言与序列逐元素断言, 失败时抛出带诊断信息的异常。

异常分类:
    UnitTestFailure       | 断言失败 (谓词不成立)
    UnitTestError         | 结构性错误 (如容器长度不同)
    UnitTestKnownFailure  | 调用方主动标记的已知失败

基本使用:
    from numassert.assertion import assert_array_almost_equal

    assert_array_almost_equal(dut, golden, __file__, 12, a_tol=1e-5)
"""

from .types import (
    ComparisonOutcome,
    FailureDetail,
    MismatchRow,
    SourceLocation,
    TestOutcome,
)
from .exceptions import (
    UnitTestError,
    UnitTestException,
    UnitTestFailure,
    UnitTestKnownFailure,
    known_failure,
    outcome_of,
)
from .predicate import (
    AlmostEqualTo,
    EqualTo,
    almost_equal,
    equal,
    generic_abs,
    ordered_ge,
    ordered_le,
)
from .scalar import (
    assert_almost_equal,
    assert_equal,
    assert_equal_quiet,
    assert_gequal,
    assert_lequal,
    assert_throws,
)
from .sequence import (
    assert_almost_equal_ranges,
    assert_array_almost_equal,
    assert_array_equal,
    assert_equal_ranges,
)
from .adapter import SequenceView, container_size, to_host_sequence
from .report import render_failure

__all__ = [
    # 类型
    "ComparisonOutcome",
    "FailureDetail",
    "MismatchRow",
    "SourceLocation",
    "TestOutcome",
    # 异常
    "UnitTestException",
    "UnitTestFailure",
    "UnitTestError",
    "UnitTestKnownFailure",
    "known_failure",
    "outcome_of",
    # 谓词
    "equal",
    "ordered_le",
    "ordered_ge",
    "generic_abs",
    "almost_equal",
    "EqualTo",
    "AlmostEqualTo",
    # 标量断言
    "assert_equal",
    "assert_equal_quiet",
    "assert_lequal",
    "assert_gequal",
    "assert_almost_equal",
    "assert_throws",
    # 序列断言
    "assert_equal_ranges",
    "assert_almost_equal_ranges",
    "assert_array_equal",
    "assert_array_almost_equal",
    # 适配
    "SequenceView",
    "container_size",
    "to_host_sequence",
    # 报告
    "render_failure",
]
