"""序列断言测试"""
import numpy as np
import pytest

from numassert import (
    ConfigError,
    SequenceView,
    UnitTestError,
    UnitTestFailure,
    assert_almost_equal_ranges,
    assert_array_almost_equal,
    assert_array_equal,
    assert_equal_ranges,
    set_config,
)
from numassert.assertion.types import MismatchRow


def _row_lines(message: str):
    return [line for line in message.splitlines() if line.startswith("  [")]


class _CountingList(list):
    """记录 __iter__ 调用次数的 list"""

    def __init__(self, *args):
        super().__init__(*args)
        self.iterations = 0

    def __iter__(self):
        self.iterations += 1
        return super().__iter__()


class TestEqualRanges:
    """迭代器形式"""

    def test_pass(self):
        assert_equal_ranges([1, 2, 3], [1, 2, 3])

    def test_empty(self):
        assert_equal_ranges([], [])

    def test_single_mismatch(self):
        """[1,2,3] vs [1,5,3]: 下标 1 处一个不一致, 共比对 3 个位置"""
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_equal_ranges([1, 2, 3], [1, 5, 3], None, "seq.py", 10)

        detail = exc_info.value.detail
        assert detail.mismatch_count == 1
        assert detail.total_compared == 3
        assert detail.rows == [MismatchRow(1, 2, 5)]
        assert detail.truncated is False

        msg = str(exc_info.value)
        assert msg.startswith("[seq.py:10] Sequences are not equal [type='int']\n")
        assert _row_lines(msg) == ["  [1] 2  5"]
        assert "Sequences differ at 1 of 3 positions" in msg
        assert "(output limit reached)" not in msg

    def test_full_message_layout(self):
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_equal_ranges([1, 2], [1, 3])
        assert str(exc_info.value) == (
            "[unknown:-1] Sequences are not equal [type='int']\n"
            "--------------------------------\n"
            "  [1] 2  3\n"
            "--------------------------------\n"
            "Sequences differ at 1 of 2 positions\n"
        )

    def test_truncation(self, mismatched_20):
        """20 处不一致, 只列出 10 行并给出截断标记"""
        a, b = mismatched_20
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_equal_ranges(a, b)

        msg = str(exc_info.value)
        assert len(_row_lines(msg)) == 10
        assert "  (output limit reached)" in msg
        assert "Sequences differ at 20 of 20 positions" in msg
        assert exc_info.value.detail.mismatch_count == 20
        assert exc_info.value.detail.truncated is True

    def test_exactly_at_limit(self):
        """恰好 10 处不一致时不截断"""
        a = list(range(10))
        b = [x + 1 for x in a]
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_equal_ranges(a, b)
        msg = str(exc_info.value)
        assert len(_row_lines(msg)) == 10
        assert "(output limit reached)" not in msg

    def test_output_limit_from_config(self, mismatched_20):
        set_config(max_output_lines=3)
        a, b = mismatched_20
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_equal_ranges(a, b)
        assert len(_row_lines(str(exc_info.value))) == 3
        assert "Sequences differ at 20 of 20 positions" in str(exc_info.value)

    def test_custom_predicate(self):
        """调用方提供逐元素谓词"""
        same_parity = lambda x, y: x % 2 == y % 2  # noqa: E731
        assert_equal_ranges([1, 2, 3], [3, 4, 5], same_parity)
        with pytest.raises(UnitTestFailure, match="differ at 2 of 3"):
            assert_equal_ranges([1, 2, 3], [2, 4, 6], same_parity)

    def test_generators_single_pass(self):
        """生成器只能遍历一次"""
        assert_equal_ranges((x * 2 for x in range(5)), iter([0, 2, 4, 6, 8]))

    def test_each_input_traversed_once(self):
        a = _CountingList([1, 2, 3])
        b = _CountingList([1, 2, 4])
        with pytest.raises(UnitTestFailure):
            assert_equal_ranges(a, b)
        assert a.iterations == 1
        assert b.iterations == 1

    def test_second_longer_ignored(self):
        """第二个序列多出的尾部元素不参与比对"""
        assert_equal_ranges([1, 2], [1, 2, 99])

    def test_second_shorter(self):
        """第二个序列不足时为结构性错误"""
        with pytest.raises(UnitTestError, match="shorter"):
            assert_equal_ranges([1, 2, 3], [1, 2])

    def test_type_name_from_view(self):
        view = SequenceView([1.0, 2.0], type_name="float16", size=2)
        with pytest.raises(UnitTestFailure, match="type='float16'"):
            assert_equal_ranges(view, [1.0, 3.0])


class TestAlmostEqualRanges:
    """近似比对"""

    def test_pass(self):
        assert_almost_equal_ranges([1.0, 2.0, 3.0], [1.00001, 2.00001, 2.99999])

    def test_one_out_of_tolerance(self):
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_almost_equal_ranges([1.0, 2.0, 3.0], [1.00001, 2.5, 3.0])
        detail = exc_info.value.detail
        assert detail.mismatch_count == 1
        assert detail.rows[0].index == 1
        assert detail.type_name == "float"

    def test_tolerance_override(self):
        assert_almost_equal_ranges([1.0, 2.0], [1.05, 2.05], a_tol=0.1, r_tol=0.0)

    def test_invalid_tolerance(self):
        with pytest.raises(ConfigError, match="absolute_tol"):
            assert_almost_equal_ranges([1.0], [1.0], a_tol=-1.0)


class TestArrayEqual:
    """容器形式"""

    def test_pass_lists(self):
        assert_array_equal([1, 2, 3], [1, 2, 3])

    def test_size_mismatch(self):
        """长度不同: 结构性错误, 不做逐元素比对"""
        a = _CountingList([1, 2, 3])
        b = _CountingList([9, 9, 9, 9, 9])
        with pytest.raises(UnitTestError) as exc_info:
            assert_array_equal(a, b, "c.py", 1)

        msg = str(exc_info.value)
        assert "Sequences have different sizes" in msg
        assert "Sequences are not equal" not in msg
        assert _row_lines(msg) == []
        assert not isinstance(exc_info.value, AssertionError)
        assert a.iterations == 0
        assert b.iterations == 0

    def test_numpy_mismatch(self):
        a = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        b = np.array([1.0, 2.0, 4.0], dtype=np.float32)
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_array_equal(a, b)
        msg = str(exc_info.value)
        assert "[type='float32']" in msg
        assert _row_lines(msg) == ["  [2] 3.0  4.0"]

    def test_numpy_multidim_flat_index(self):
        """多维数组按展平后的下标报告"""
        a = np.arange(6).reshape(2, 3)
        b = a.copy()
        b[1, 0] = 42
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_array_equal(a, b)
        assert exc_info.value.detail.rows[0].index == 3
        assert exc_info.value.detail.total_compared == 6

    def test_numpy_size_mismatch(self):
        with pytest.raises(UnitTestError, match="different sizes"):
            assert_array_equal(np.zeros(3), np.zeros(5))


class TestArrayAlmostEqual:
    """容器形式近似比对"""

    def test_pass(self):
        golden = np.linspace(0, 1, 16, dtype=np.float64)
        dut = golden + 1e-6
        assert_array_almost_equal(golden, dut)

    def test_fail(self):
        golden = np.ones(20, dtype=np.float64)
        dut = golden + 0.5
        with pytest.raises(UnitTestFailure) as exc_info:
            assert_array_almost_equal(golden, dut, "dut.py", 3)
        msg = str(exc_info.value)
        assert "[type='float64']" in msg
        assert "(output limit reached)" in msg
        assert "Sequences differ at 20 of 20 positions" in msg

    def test_tolerance_override(self):
        assert_array_almost_equal([1.0, 2.0], [1.05, 2.05], a_tol=0.1, r_tol=0.0)

    def test_nan_tolerance_not_a_failure(self):
        """NaN 容差是配置错误, 不当作比对失败"""
        with pytest.raises(ConfigError, match="absolute_tol must be finite"):
            assert_array_almost_equal(np.zeros(4), np.full(4, 1e6), a_tol=float("nan"))

    def test_size_mismatch(self):
        with pytest.raises(UnitTestError, match="different sizes"):
            assert_array_almost_equal([1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0, 5.0])
