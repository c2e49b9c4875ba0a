"""
Pseudo-random sampling from uniform, Gaussian and triangular distributions.

Responsibilities:
    * turn raw integer draws from an injected uniform source into [0, 1] floats
    * sample Gaussian deviates with the Marsaglia polar method
    * approximate normal / triangular shapes by summing scaled uniforms
    * evaluate the Gaussian density

Every sampler owns its source and its cached Gaussian deviate, so two
samplers never share state. A single sampler is not thread-safe; give each
thread its own instance (see ``SamplerPool``).
"""
# 说明：基于可注入均匀随机源的采样器，实现均匀、高斯（极坐标法）、Irwin–Hall 近似正态与三角分布采样。
# 职责：
# - UniformSource / NumpyUniformSource：均匀整数随机源接口及其 numpy Generator 实现，draw() ∈ [0, range_max]
# - RandomSampler：
#   * uniform_float / uniform_double：单精度 / 双精度 [0,1] 均匀采样
#   * standard_gaussian：极坐标法标准正态采样（每次只取第一个偏差）
#   * gaussian：极坐标法一次产生两个偏差，第二个缓存在实例上供下一次调用返回
#   * gaussian_density：高斯概率密度函数（纯函数）
#   * sample_normal / sample_triangular：12 项 / 2 项缩放均匀量求和的近似采样
# - SamplerPool：由同一基础种子拆分出的一组独立采样器，供并行调用方各取一个
# 约定：
# - 拒绝采样循环受 max_rejections 限制；耗尽时记录 warning 并以 0 偏差回退
# - 严格校验开启时，stddev <= 0 或非有限的均值 / spread 直接抛出 ParamValidationError

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Tuple

import numpy as np

from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ParamValidationError, ensure, ensure_type, validate_arguments
from .utils.random import SeedLike, create_rng, reseed_rng, split_rng
from .validity import ensure_valid, is_valid

logger = get_logger(__name__)

# 与 glibc RAND_MAX 相同的原始抽样上界（含）
RANGE_MAX = 2**31 - 1
IRWIN_HALL_TERMS = 12

_SQRT_2PI = math.sqrt(2.0 * math.pi)
_TRIANGULAR_SCALE = np.float32(math.sqrt(6.0) / 2.0)
_TRIANGULAR_REACH = math.sqrt(6.0)
_HALF = np.float32(0.5)
_TWO = np.float32(2.0)

_UNSET: Any = object()


class UniformSource(Protocol):
    """Source of integers uniformly distributed over ``[0, range_max]``."""

    range_max: int

    def draw(self) -> int:
        ...


class NumpyUniformSource:
    """Uniform integer source backed by a numpy ``Generator``."""

    def __init__(self, rng: SeedLike = None, range_max: int = RANGE_MAX):
        ensure_type(range_max, (int, np.integer), label="range_max")
        ensure(range_max > 0, "range_max must be positive")
        self._rng = create_rng(rng)
        self.range_max = int(range_max)

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def draw(self) -> int:
        return int(self._rng.integers(0, self.range_max, endpoint=True))

    def reseed(self, seed: Optional[int]) -> None:
        reseed_rng(self._rng, seed)


def _finite(label: str):
    # 构造“必须为有限数”的参数验证器；仅在严格校验模式下生效
    def validator(value: Any) -> Any:
        if get_config().strict_validation:
            ensure_valid(value, label)
        return value

    return validator


def _positive_stddev(value: Any) -> Any:
    if get_config().strict_validation:
        ensure(is_valid(value) and value > 0, f"stddev must be a finite positive number, got {value!r}")
    return value


class RandomSampler:
    """
    Samplers for the distributions used by learning code.

    - Configuration
      - source: object with ``draw()`` and ``range_max``; defaults to a
        ``NumpyUniformSource`` seeded with ``seed`` or ``RuntimeConfig.rng_seed``.
      - max_rejections: cap on polar-method iterations per deviate pair;
        ``None`` removes the cap. Defaults to ``RuntimeConfig.max_rejections``.

    - Behavior
      - ``gaussian`` alternates between computing a fresh pair (returning the
        first, caching the second) and returning the cached value.
      - ``standard_gaussian`` never touches the cache.

    - Usage Notes
      - Not thread-safe; use one sampler per thread.
    """

    def __init__(
        self,
        source: Optional[UniformSource] = None,
        *,
        seed: Optional[int] = None,
        max_rejections: Optional[int] = _UNSET,
    ):
        config = get_config()
        if source is None:
            source = NumpyUniformSource(seed if seed is not None else config.rng_seed)
        elif seed is not None:
            raise ParamValidationError("pass either a source or a seed, not both")
        if max_rejections is _UNSET:
            max_rejections = config.max_rejections
        ensure(max_rejections is None or max_rejections > 0, "max_rejections must be positive or None")
        self._source = source
        self._max_rejections = max_rejections
        self._cached = 0.0
        self._has_cached = False

    @property
    def source(self) -> UniformSource:
        return self._source

    @property
    def max_rejections(self) -> Optional[int]:
        return self._max_rejections

    @property
    def has_cached_deviate(self) -> bool:
        return self._has_cached

    def clear_cache(self) -> None:
        self._cached = 0.0
        self._has_cached = False

    def reseed(self, seed: Optional[int]) -> None:
        """Reseed the underlying source in place and drop any cached deviate."""
        reseed = getattr(self._source, "reseed", None)
        if reseed is None:
            raise TypeError(f"{type(self._source).__name__} does not support reseeding")
        reseed(seed)
        self.clear_cache()
        logger.debug("Reseeded sampler with seed %s.", seed)

    # ------------------------------------------------------------------ uniform
    def uniform_float(self) -> float:
        """Single-precision uniform value in [0, 1]."""
        scale = np.float32(1.0) / np.float32(self._source.range_max)
        return float(np.float32(self._source.draw()) * scale)

    def uniform_double(self) -> float:
        """Double-precision uniform value in [0, 1]."""
        return self._source.draw() / float(self._source.range_max)

    # ------------------------------------------------------------------ gaussian
    def _polar_pair(self) -> Optional[Tuple[float, float]]:
        # 极坐标法：在单位圆内（去掉原点）拒绝采样，一次接受产生两个独立标准正态偏差
        attempts = 0
        while self._max_rejections is None or attempts < self._max_rejections:
            attempts += 1
            v1 = 2.0 * self.uniform_double() - 1.0
            v2 = 2.0 * self.uniform_double() - 1.0
            r = v1 * v1 + v2 * v2
            if 0.0 < r < 1.0:
                fac = math.sqrt(-2.0 * math.log(r) / r)
                return v1 * fac, v2 * fac
        logger.warning(
            "Polar method rejected %d candidate pairs; falling back to a zero deviate.",
            attempts,
        )
        return None

    def standard_gaussian(self) -> float:
        """A standard normal deviate (mean 0, variance 1)."""
        pair = self._polar_pair()
        return 0.0 if pair is None else pair[0]

    @staticmethod
    @validate_arguments({"x": _finite("x"), "mean": _finite("mean"), "stddev": _positive_stddev})
    def gaussian_density(x: float, mean: float, stddev: float) -> float:
        """Gaussian probability density at ``x``."""
        # 非严格模式下 stddev == 0 按 IEEE 语义得到 inf / NaN，而不是抛出 ZeroDivisionError
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            z = np.float64(x - mean) / np.float64(stddev)
            return float(np.exp(-0.5 * z * z) / (np.float64(stddev) * _SQRT_2PI))

    @validate_arguments({"mean": _finite("mean"), "stddev": _positive_stddev})
    def gaussian(self, mean: float, stddev: float) -> float:
        """Normal deviate with the given mean and standard deviation."""
        if self._has_cached:
            self._has_cached = False
            return self._cached * stddev + mean
        pair = self._polar_pair()
        if pair is None:
            return mean
        n1, n2 = pair
        self._cached = n2
        self._has_cached = True
        return n1 * stddev + mean

    # ------------------------------------------------------------------ sums of uniforms
    @staticmethod
    def _spread32(spread: float, reach: float) -> np.float32:
        # 采样在单精度下进行；reach 为中间累加量相对 |spread| 的最大倍数，
        # 严格模式下要求 reach * |spread| 仍可由 float32 表示，否则转换或累加会溢出为 inf / NaN
        with np.errstate(over="ignore"):
            b = np.float32(spread)
        if get_config().strict_validation:
            ensure_valid(b, "spread")
            ensure(
                abs(float(spread)) * reach <= float(np.finfo(np.float32).max),
                f"spread {spread!r} overflows single precision",
            )
        return b

    def _scaled_uniform(self, spread: np.float32) -> np.float32:
        # 把 [0,1] 均匀量线性映射到 [-spread, spread]
        return _TWO * ((np.float32(self.uniform_float()) - _HALF) * spread)

    @validate_arguments({"spread": _finite("spread")})
    def sample_normal(self, spread: float) -> float:
        """Irwin–Hall approximation of a normal deviate; support ``[-6|spread|, 6|spread|]``."""
        b = self._spread32(spread, IRWIN_HALL_TERMS)
        total = np.float32(0.0)
        for _ in range(IRWIN_HALL_TERMS):
            total += self._scaled_uniform(b)
        return float(total / _TWO)

    @validate_arguments({"spread": _finite("spread")})
    def sample_triangular(self, spread: float) -> float:
        """Triangular-shaped deviate; support ``[-sqrt(6)|spread|, sqrt(6)|spread|]``."""
        b = self._spread32(spread, _TRIANGULAR_REACH)
        total = self._scaled_uniform(b) + self._scaled_uniform(b)
        return float(_TRIANGULAR_SCALE * total)


@dataclass
class SamplerPool:
    """
    Manage a pool of independent samplers for parallel callers.

    - Configuration
      - base_seed: Optional seed used to initialize the pool.
      - pool_size: Number of samplers maintained in the pool.

    - Behavior
      - Splits one base generator into independent streams, one per sampler.
      - Each sampler keeps its own Gaussian cache.
    """

    base_seed: Optional[int] = None
    pool_size: int = 4
    _pool: List[RandomSampler] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        ensure_type(self.pool_size, (int, np.integer), label="pool_size")
        self._pool = self._build(self.base_seed)

    def _build(self, seed: Optional[int]) -> List[RandomSampler]:
        children = split_rng(create_rng(seed), self.pool_size)
        return [RandomSampler(NumpyUniformSource(child)) for child in children]

    def __len__(self) -> int:
        return len(self._pool)

    def get(self, index: int) -> RandomSampler:
        # 通过索引循环获取池中的采样器，避免索引越界
        return self._pool[index % self.pool_size]

    def reseed(self, seed: Optional[int]) -> None:
        self._pool = self._build(seed)
        logger.debug("Rebuilt sampler pool of %d with seed %s.", self.pool_size, seed)
