"""
失败信息生成

把 FailureDetail 渲染为单条失败消息。序列比对的消息格式:

    [file:line] Sequences are not equal [type='float64']
    --------------------------------
      [1] 2  5
    --------------------------------
    Sequences differ at 1 of 3 positions
"""

from numassert.core.constants import SEPARATOR

from .types import FailureDetail, SourceLocation


def format_location(loc: SourceLocation) -> str:
    """格式化源码位置"""
    return str(loc)


def format_type(type_name: str) -> str:
    return f"[type='{type_name}']"


def format_scalar_failure(detail: FailureDetail) -> str:
    """标量比对失败消息"""
    return f"{format_location(detail.location)} {detail.message} {format_type(detail.type_name)}"


def format_sequence_failure(detail: FailureDetail) -> str:
    """序列比对失败消息 (逐行列出不一致元素)"""
    lines = [
        f"{format_location(detail.location)} Sequences are not equal {format_type(detail.type_name)}",
        SEPARATOR,
    ]
    for row in detail.rows:
        lines.append(f"  [{row.index}] {row.value_a}  {row.value_b}")
    if detail.truncated:
        lines.append("  (output limit reached)")
    lines.append(SEPARATOR)
    lines.append(
        f"Sequences differ at {detail.mismatch_count} of {detail.total_compared} positions"
    )
    return "\n".join(lines) + "\n"


def render_failure(detail: FailureDetail) -> str:
    """按比对类型渲染失败消息"""
    if detail.is_sequence:
        return format_sequence_failure(detail)
    return format_scalar_failure(detail)
