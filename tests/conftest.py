"""Shared fixtures for numassert tests."""

import pathlib

import pytest
import yaml

from numassert.core.config import reset_config
from numassert.core.log import INFO, set_level


@pytest.fixture(autouse=True)
def clean_config():
    """每个用例使用默认配置与 INFO 日志级别"""
    reset_config()
    set_level(INFO)
    yield
    reset_config()
    set_level(INFO)


@pytest.fixture()
def write_yaml(tmp_path):
    """写入 YAML 配置文件并返回路径"""

    def _write(data, name="numassert.yaml") -> pathlib.Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh)
        return path

    return _write


@pytest.fixture()
def mismatched_20():
    """20 个位置全部不同的两个序列"""
    a = list(range(20))
    b = [x + 100 for x in a]
    return a, b
