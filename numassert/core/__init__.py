"""核心模块"""
from numassert.core.config import (
    AssertConfig,
    ConfigError,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from numassert.core.constants import (
    DEFAULT_ABSOLUTE_TOL,
    DEFAULT_RELATIVE_TOL,
    MAX_OUTPUT_LINES,
)
from numassert.core.log import logger

__all__ = [
    # config
    "AssertConfig",
    "ConfigError",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # constants
    "DEFAULT_ABSOLUTE_TOL",
    "DEFAULT_RELATIVE_TOL",
    "MAX_OUTPUT_LINES",
    # log
    "logger",
]
