"""日志模块

断言核心本身从不写日志, 仅适配层与配置加载使用。
"""
import sys
from datetime import datetime
from enum import IntEnum
from typing import Union


class Level(IntEnum):
    """日志级别枚举"""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

DEBUG, INFO, WARN, ERROR = Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR

_level = INFO
_module = "numassert"


def parse_level(value: Union[str, int, Level]) -> Level:
    """
    解析日志级别

    Args:
        value: 级别名 ("debug" / "WARNING" ...) 或数值

    Returns:
        Level

    Raises:
        ValueError: 未知级别
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        return Level(value)
    name = str(value).strip().upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return Level[name]
    except KeyError:
        raise ValueError(f"unknown log level: {value!r}") from None


def set_level(level: Union[str, int, Level]):
    """设置日志级别"""
    global _level  # pylint: disable=global-statement
    _level = parse_level(level)


def get_level() -> Level:
    """获取当前日志级别"""
    return _level


def set_module(name: str):
    """设置默认模块名"""
    global _module  # pylint: disable=global-statement
    _module = name


def _emit(level: Level, module: str, msg: str):
    if level < _level:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out = sys.stderr if level >= WARN else sys.stdout
    print(f"[{ts}] [{level.name}] [{module}] {msg}", file=out)


class Logger:
    """按模块名输出的日志记录器"""

    def __init__(self, module: str = ""):
        self.module = module or _module

    def enabled(self, level: Level) -> bool:
        """level 是否会被输出 (用于跳过昂贵的消息拼接)"""
        return level >= _level

    def debug(self, msg: str):
        _emit(DEBUG, self.module, msg)

    def info(self, msg: str):
        _emit(INFO, self.module, msg)

    def warn(self, msg: str):
        _emit(WARN, self.module, msg)

    warning = warn  # 标准 logging 兼容别名

    def error(self, msg: str):
        _emit(ERROR, self.module, msg)


logger = Logger()
