"""
Three-way sign extraction.
"""
# 说明：返回数值符号 {-1, 0, +1}。
# 约定：
# - -0.0 视为 0（两次比较均为假）
# - NaN 同样返回 0

from __future__ import annotations

from typing import Any


def sign(value: Any) -> int:
    """Return +1 for positive, -1 for negative and 0 for zero (including -0.0)."""
    return int(0 < value) - int(value < 0)


class Signum:
    @staticmethod
    def value_of(value: Any) -> int:
        return sign(value)
