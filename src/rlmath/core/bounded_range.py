"""
Closed interval over an ordered numeric type.

Responsibilities:
    * clamp values into ``[minv, maxv]`` and test membership
    * report the interval's length and midpoint
    * build "unbounded" ranges from numpy type limits
"""
# 说明：闭区间 [minv, maxv] 的数值范围类型，常用于测试环境中的状态/动作取值范围管理。
# 职责：
# - bound：把数值裁剪到区间内，固定为 max(minv, min(maxv, value))
# - contains / __contains__：闭区间成员判定
# - length / center：区间长度与中点（中点始终按浮点计算）
# - unbounded：按 numpy 类型上下限构造“无界”区间
# 约定：
# - 不校验 minv <= maxv；顺序颠倒时各方法结果确定但不再具有“有界”语义

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import numpy as np

T = TypeVar("T", int, float, np.integer, np.floating)


def _type_limits(dtype: Any) -> tuple:
    # 整型用 iinfo，浮点用 finfo；浮点下界取最小（最负）有限值而非最小正规数
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.integer):
        info = np.iinfo(dt)
        return dt.type(info.min), dt.type(info.max)
    if np.issubdtype(dt, np.floating):
        info = np.finfo(dt)
        return dt.type(info.min), dt.type(info.max)
    raise TypeError(f"unsupported dtype for BoundedRange: {dt}")


_FLOAT64_MIN, _FLOAT64_MAX = (float(v) for v in _type_limits(np.float64))


@dataclass(frozen=True)
class BoundedRange(Generic[T]):
    """
    Immutable closed interval ``[minv, maxv]``.

    - Defaults
      - With no arguments the range spans every finite float64, i.e. it
        does not bound anything in practice.

    - Behavior
      - ``bound`` clamps, ``contains`` tests membership (both inclusive).
      - ``center`` is computed in floating point even for integral bounds.
      - Ordering of the bounds is the caller's responsibility and is never
        enforced; see ``is_ordered``.
    """

    minv: T = field(default=_FLOAT64_MIN)  # type: ignore[assignment]
    maxv: T = field(default=_FLOAT64_MAX)  # type: ignore[assignment]

    @classmethod
    def unbounded(cls, dtype: Any = np.float64) -> "BoundedRange":
        """Range spanning the lowest and highest finite values of ``dtype``."""
        lo, hi = _type_limits(dtype)
        return cls(lo, hi)

    def bound(self, value: T) -> T:
        return max(self.minv, min(self.maxv, value))

    def contains(self, value: T) -> bool:
        return bool(self.minv <= value <= self.maxv)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def length(self) -> T:
        # numpy 定宽整型先转为 Python int 再相减，避免 unbounded(np.int32) 等区间回绕
        if isinstance(self.minv, np.integer) or isinstance(self.maxv, np.integer):
            return int(self.maxv) - int(self.minv)
        return self.maxv - self.minv

    def center(self) -> float:
        # 整数区间的中点可能不是整数，因此先转为浮点再求长度，避免定宽整型溢出
        lo = float(self.minv)
        return lo + (float(self.maxv) - lo) / 2.0

    def min_of(self) -> T:
        return self.minv

    def max_of(self) -> T:
        return self.maxv

    def is_ordered(self) -> bool:
        return bool(self.minv <= self.maxv)
