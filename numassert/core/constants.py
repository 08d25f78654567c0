"""全局常量定义

集中管理断言引擎的默认容差和输出上限。
"""

# ============================================================
# 容差默认值
# ============================================================

# |a - b| <= r_tol * (|a| + |b|) + a_tol
DEFAULT_ABSOLUTE_TOL = 1e-4
DEFAULT_RELATIVE_TOL = 1e-4


# ============================================================
# 失败报告
# ============================================================

# 序列比对最多输出的不一致行数
MAX_OUTPUT_LINES = 10

# 报告分隔线
SEPARATOR = "-" * 32


# ============================================================
# 源码位置默认值
# ============================================================

UNKNOWN_FILENAME = "unknown"
UNKNOWN_LINENO = -1
