"""numassert - 数值计算断言与比对引擎

标量断言:
    from numassert import assert_equal, assert_almost_equal

    assert_equal(out.shape[0], 128, __file__, 10)
    assert_almost_equal(loss, 0.6931, a_tol=1e-5)

序列断言 (报告全部不一致位置, 最多列出 max_output_lines 行):
    from numassert import assert_array_almost_equal

    assert_array_almost_equal(dut, golden, __file__, 20)

全局配置:
    from numassert import set_config, load_config

    set_config(absolute_tol=1e-6, relative_tol=1e-5)
    load_config("numassert.yaml")
"""
__version__ = "0.1.0"

from numassert.assertion import (
    AlmostEqualTo,
    EqualTo,
    FailureDetail,
    SequenceView,
    SourceLocation,
    TestOutcome,
    UnitTestError,
    UnitTestFailure,
    UnitTestKnownFailure,
    almost_equal,
    assert_almost_equal,
    assert_almost_equal_ranges,
    assert_array_almost_equal,
    assert_array_equal,
    assert_equal,
    assert_equal_quiet,
    assert_equal_ranges,
    assert_gequal,
    assert_lequal,
    assert_throws,
    known_failure,
    outcome_of,
)
from numassert.core import (
    AssertConfig,
    ConfigError,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    "__version__",
    "AssertConfig",
    "ConfigError",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # 断言
    "assert_equal",
    "assert_equal_quiet",
    "assert_lequal",
    "assert_gequal",
    "assert_almost_equal",
    "assert_throws",
    "assert_equal_ranges",
    "assert_almost_equal_ranges",
    "assert_array_equal",
    "assert_array_almost_equal",
    "known_failure",
    # 谓词
    "almost_equal",
    "EqualTo",
    "AlmostEqualTo",
    # 类型与异常
    "FailureDetail",
    "SourceLocation",
    "SequenceView",
    "TestOutcome",
    "UnitTestFailure",
    "UnitTestError",
    "UnitTestKnownFailure",
    "outcome_of",
]
