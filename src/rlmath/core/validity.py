"""
Finite-value checks for scalar numerics.

Responsibilities:
    * tell whether a value is defined and finite (not NaN, not +/-inf)
    * fail fast on non-finite inputs where a caller asks for it
"""
# 说明：标量数值有效性检查。
# 职责：
# - is_valid：判断数值既非 NaN 也非正负无穷；整数类型恒为有效
# - ensure_valid：数值无效时抛出 ParamValidationError，用于入参快速失败
# - Boundedness：保留面向类的静态调用入口

from __future__ import annotations

import math
import numbers
from typing import Any, TypeVar

import numpy as np

from .utils.param_validation import ParamValidationError

T = TypeVar("T")


def is_valid(value: Any) -> bool:
    """Return True when ``value`` is neither NaN nor infinite."""
    # 整数（含 bool 与 numpy 整型）没有 NaN / inf 表示，恒为有效
    if isinstance(value, (numbers.Integral, np.integer)):
        return True
    if isinstance(value, np.floating):
        return bool(np.isfinite(value))
    return math.isfinite(value)


def ensure_valid(value: T, label: str = "value") -> T:
    """Return ``value`` unchanged, raising ParamValidationError if it is NaN or infinite."""
    if not is_valid(value):
        raise ParamValidationError(f"{label} must be finite, got {value!r}")
    return value


class Boundedness:
    """Class-style entry point kept for callers that group checks under one name."""

    @staticmethod
    def check_value(value: Any) -> bool:
        return is_valid(value)
