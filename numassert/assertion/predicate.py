"""
比对谓词

单对数值的相等 / 近似相等 / 有序判定。只返回 bool, 从不抛出断言异常。

近似相等判定条件:
    |a - b| <= r_tol * (|a| + |b|) + a_tol

对 a, b 对称; 接近 0 时退化为绝对误差判定, 数值较大时近似相对误差判定。
"""

from typing import Any, Optional

from numassert.core.config import check_tolerance, get_config


def equal(a: Any, b: Any) -> bool:
    """值相等, 不带容差"""
    return bool(a == b)


def ordered_le(a: Any, b: Any) -> bool:
    """a <= b"""
    return bool(a <= b)


def ordered_ge(a: Any, b: Any) -> bool:
    """a >= b"""
    return bool(a >= b)


def generic_abs(x: Any) -> Any:
    """
    通用绝对值

    只依赖与 0 比较和取负, 不要求类型实现 __abs__。
    """
    return x if x > 0 else -x


def almost_equal(a: Any, b: Any, a_tol: float, r_tol: float) -> bool:
    """
    近似相等判定

    Args:
        a: 值 a
        b: 值 b
        a_tol: 绝对容差
        r_tol: 相对容差

    Returns:
        |a - b| <= r_tol * (|a| + |b|) + a_tol; 任一为 NaN 时为 False

    r_tol > 0 时只要一侧为 inf, 上界即为 inf, 结果为 True (包括 inf 与 -inf);
    r_tol == 0 时 0 * inf 为 NaN, 与有限值比较结果为 False。
    """
    # 完全相等直接通过 (inf == inf 时差值为 NaN)
    if a == b:
        return True
    diff = generic_abs(a - b)
    bound = r_tol * (generic_abs(a) + generic_abs(b)) + a_tol
    return bool(diff <= bound)


class EqualTo:
    """值相等谓词, 序列比对的默认逐元素谓词"""

    def __call__(self, a: Any, b: Any) -> bool:
        return equal(a, b)

    def __repr__(self) -> str:
        return "EqualTo()"


class AlmostEqualTo:
    """
    绑定容差的近似相等谓词

    使用示例:
        pred = AlmostEqualTo(a_tol=1e-6, r_tol=1e-5)
        pred(1.0, 1.000001)  # True
    """

    def __init__(self, a_tol: Optional[float] = None, r_tol: Optional[float] = None):
        """
        Args:
            a_tol: 绝对容差, None 取全局配置
            r_tol: 相对容差, None 取全局配置

        Raises:
            ConfigError: 容差为负、NaN、inf 或不是数值
        """
        config = get_config()
        self.a_tol = config.absolute_tol if a_tol is None else a_tol
        self.r_tol = config.relative_tol if r_tol is None else r_tol
        check_tolerance("absolute_tol", self.a_tol)
        check_tolerance("relative_tol", self.r_tol)

    def __call__(self, a: Any, b: Any) -> bool:
        return almost_equal(a, b, self.a_tol, self.r_tol)

    def __repr__(self) -> str:
        return f"AlmostEqualTo(a_tol={self.a_tol}, r_tol={self.r_tol})"
