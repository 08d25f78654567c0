"""
容器适配

把调用方持有的容器 (numpy 数组、torch 张量、list、迭代器) 转成只读、单次遍历的
host 端 SequenceView。torch 张量先拷回 host 再展平, 不在比对核心中处理设备内存。
"""

from collections.abc import Iterable, Iterator, Sized
from typing import Any, Optional

import numpy as np

from numassert.core.log import DEBUG, Logger

from .exceptions import UnitTestError

logger = Logger("numassert.adapter")


class SequenceView:
    """
    只读、只能正向遍历一次的序列视图

    Attributes:
        type_name: 元素类型名 (数组取 dtype 名), 未知时为 None
        size: 元素个数, 纯迭代器为 None
    """

    def __init__(self, values: Iterable, type_name: Optional[str] = None, size: Optional[int] = None):
        self._values = values
        self.type_name = type_name
        self.size = size
        self._consumed = False

    def __iter__(self) -> Iterator:
        if self._consumed:
            raise UnitTestError("SequenceView can only be traversed once")
        self._consumed = True
        return iter(self._values)

    def __repr__(self) -> str:
        return f"SequenceView(type_name={self.type_name!r}, size={self.size})"


def is_tensor(obj: Any) -> bool:
    """鸭子类型判断 torch.Tensor, 不强制依赖 torch"""
    return all(hasattr(obj, attr) for attr in ("detach", "cpu", "numel", "dtype"))


def _tensor_to_numpy(tensor: Any) -> np.ndarray:
    host = tensor.detach().cpu()
    # numpy 没有 bfloat16
    if str(host.dtype) == "torch.bfloat16":
        host = host.float()
    return host.numpy()


def container_size(obj: Any) -> int:
    """
    容器元素个数 (多维数组按总元素数)

    Raises:
        TypeError: 对象没有长度信息
    """
    if isinstance(obj, SequenceView):
        if obj.size is None:
            raise TypeError("SequenceView over an iterator has no size")
        return obj.size
    if isinstance(obj, np.ndarray):
        return int(obj.size)
    if is_tensor(obj):
        return int(obj.numel())
    if isinstance(obj, Sized):
        return len(obj)
    raise TypeError(f"object of type {type(obj).__name__} has no size")


def to_host_sequence(obj: Any) -> SequenceView:
    """
    转换为 host 端序列视图

    Args:
        obj: numpy 数组 / torch 张量 / 可迭代对象 / SequenceView

    Returns:
        SequenceView

    Raises:
        TypeError: 对象不可迭代
    """
    if isinstance(obj, SequenceView):
        return obj

    if is_tensor(obj):
        device = getattr(obj, "device", "cpu")
        arr = _tensor_to_numpy(obj).reshape(-1)
        if logger.enabled(DEBUG):
            logger.debug(f"tensor({device}, {obj.dtype}) -> host, {arr.size} elements")
        return SequenceView(arr, type_name=str(obj.dtype).replace("torch.", ""), size=int(arr.size))

    if isinstance(obj, np.ndarray):
        arr = obj.reshape(-1)
        return SequenceView(arr, type_name=arr.dtype.name, size=int(arr.size))

    if isinstance(obj, Iterator):
        # 单次遍历的流, 不做拷贝
        return SequenceView(obj)

    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        values = list(obj)
        if logger.enabled(DEBUG):
            logger.debug(f"{type(obj).__name__} -> list, {len(values)} elements")
        return SequenceView(values, size=len(values))

    raise TypeError(f"cannot adapt {type(obj).__name__} to a sequence view")
