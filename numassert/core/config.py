"""全局配置模块

默认容差与输出上限在启动时设置一次, 断言调用只读取不修改。
"""
import math
import numbers
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from numassert.core.constants import (
    DEFAULT_ABSOLUTE_TOL,
    DEFAULT_RELATIVE_TOL,
    MAX_OUTPUT_LINES,
)
from numassert.core.log import logger, parse_level, set_level


class ConfigError(ValueError):
    """配置非法或配置文件无法解析"""


def check_tolerance(name: str, value) -> None:
    """
    校验容差: 必须是有限的非负实数

    Raises:
        ConfigError
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value) or value < 0:
        raise ConfigError(f"{name} must be finite and >= 0, got {value}")


@dataclass
class AssertConfig:
    """断言配置"""
    absolute_tol: float = DEFAULT_ABSOLUTE_TOL   # 绝对容差
    relative_tol: float = DEFAULT_RELATIVE_TOL   # 相对容差
    max_output_lines: int = MAX_OUTPUT_LINES     # 序列失败报告最多列出的行数

    def validate(self):
        """验证配置"""
        check_tolerance("absolute_tol", self.absolute_tol)
        check_tolerance("relative_tol", self.relative_tol)
        if isinstance(self.max_output_lines, bool) or not isinstance(self.max_output_lines, int):
            raise ConfigError(
                f"max_output_lines must be an int, got {type(self.max_output_lines).__name__}"
            )
        if self.max_output_lines < 0:
            raise ConfigError(f"max_output_lines must be >= 0, got {self.max_output_lines}")

    def to_dict(self) -> dict:
        return asdict(self)


# 全局配置实例 (线程安全)
_config_lock = threading.Lock()
_global_config: Optional[AssertConfig] = None


def get_config() -> AssertConfig:
    """获取全局配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = AssertConfig()
        return _global_config


def set_config(
    absolute_tol: float = None,
    relative_tol: float = None,
    max_output_lines: int = None,
) -> AssertConfig:
    """
    设置全局配置

    Args:
        absolute_tol: 默认绝对容差
        relative_tol: 默认相对容差
        max_output_lines: 序列失败报告行数上限

    Raises:
        ConfigError: 新值非法时抛出, 原配置保持不变

    Example:
        set_config(absolute_tol=1e-6, relative_tol=1e-5)
        set_config(max_output_lines=32)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        current = _global_config or AssertConfig()

        # 仅更新非 None 的配置项
        updates = {
            "absolute_tol": absolute_tol,
            "relative_tol": relative_tol,
            "max_output_lines": max_output_lines,
        }
        merged = current.to_dict()
        merged.update({k: v for k, v in updates.items() if v is not None})
        candidate = AssertConfig(**merged)
        candidate.validate()

        _global_config = candidate
        return _global_config


def reset_config():
    """重置为默认配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = AssertConfig()


def load_config(path: Union[str, Path]) -> AssertConfig:
    """
    从 YAML 文件加载并应用全局配置

    支持两种写法:

        absolute_tol: 1.0e-6
        relative_tol: 1.0e-5

    或嵌套在 ``assert`` 段下:

        assert:
          absolute_tol: 1.0e-6
          max_output_lines: 20
        log_level: debug

    Args:
        path: 配置文件路径

    Returns:
        应用后的 AssertConfig

    Raises:
        ConfigError: 文件缺失、解析失败或取值非法
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    level = None
    if "log_level" in data:
        try:
            level = parse_level(data["log_level"])
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    section = data.get("assert", data)
    if not isinstance(section, dict):
        raise ConfigError(f"'assert' section in {p} must be a mapping")

    known = {"absolute_tol", "relative_tol", "max_output_lines"}
    unknown = sorted(set(section) - known - {"assert", "log_level"})
    if unknown:
        logger.warn(f"忽略未知配置项: {', '.join(unknown)} ({p})")

    values = {k: section[k] for k in known if k in section}
    # PyYAML 把 "1e-6" (无小数点) 解析为字符串
    for key in ("absolute_tol", "relative_tol"):
        if isinstance(values.get(key), str):
            try:
                values[key] = float(values[key])
            except ValueError as exc:
                raise ConfigError(f"{key} must be a number, got {values[key]!r}") from exc

    # 先整体校验, 任一项非法时日志级别与全局配置都不改动
    candidate = AssertConfig(**{**get_config().to_dict(), **values})
    candidate.validate()

    if level is not None:
        set_level(level)
    cfg = set_config(**values)
    logger.info(f"加载配置: {p}")
    return cfg
