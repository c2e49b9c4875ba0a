"""
Sample statistics used to check sampler behaviour.

Responsibilities
  - Numerically stable mean (float64 accumulation) and variance (Welford).
  - Empirical first and second moments of a zero-argument sampler.

Usage Context
  - Validating uniform / Gaussian samplers against their theoretical moments.

Limitations
  - Scalar streams only; no vectorized reductions.
"""
# 说明：样本统计工具，用于对采样器输出做经验均值 / 方差检验。
# 职责：
# - stable_mean：float64 累加的均值
# - stable_variance：Welford 在线算法，单遍计算方差
# - empirical_moments：对零参数采样函数重复调用 n 次，返回 (均值, 方差)

from __future__ import annotations

from typing import Callable, Iterable, Tuple

import numpy as np


def stable_mean(values: Iterable[float]) -> float:
    """Return the mean using float64 accumulation."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        raise ValueError("stable_mean requires at least one value")
    return float(np.sum(arr, dtype=np.float64) / arr.size)


def stable_variance(values: Iterable[float], ddof: int = 1) -> float:
    """Return variance using Welford's algorithm."""
    mean_val = 0.0
    m2 = 0.0
    count = 0
    for value in values:
        count += 1
        delta = value - mean_val
        mean_val += delta / count
        m2 += delta * (value - mean_val)
    if count <= ddof:
        raise ValueError("not enough values to compute variance")
    return m2 / (count - ddof)


def empirical_moments(sample_fn: Callable[[], float], n: int) -> Tuple[float, float]:
    """Draw ``n`` values from ``sample_fn`` and return their (mean, variance)."""
    if n < 2:
        raise ValueError("empirical_moments requires n >= 2")
    draws = [float(sample_fn()) for _ in range(n)]
    return stable_mean(draws), stable_variance(draws, ddof=1)
