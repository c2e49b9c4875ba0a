"""
Random number generation helpers.

Responsibilities
  - Centralize numpy Generator creation and seeding.
  - Provide reproducible splits so each worker owns an independent stream.

Usage Context
  - Used by the uniform sources behind ``RandomSampler`` and by ``SamplerPool``.

Limitations
  - Relies on numpy Generator behavior for reproducibility.
"""
# 说明：随机数生成辅助工具，用于在库中统一管理 numpy Generator 的创建、重置与拆分。
# 职责：
# - create_rng / reseed_rng：集中封装 Generator 的创建与就地重置逻辑，支持显式种子与已有生成器
# - split_rng：从单一 RNG 派生出多个独立生成器，供 SamplerPool 为每个线程/工作单元分配独立流

from __future__ import annotations

from typing import List, Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def create_rng(seed: SeedLike = None) -> np.random.Generator:
    """Create a numpy Generator from a seed, SeedSequence, or existing generator."""
    # 将输入规范化为 numpy.random.Generator；若已是 Generator 则直接返回
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def reseed_rng(rng: np.random.Generator, seed: Optional[int]) -> np.random.Generator:
    """Replace RNG state with a new seed; returns the generator for chaining."""
    # 保持对象标识不变，仅替换底层 bit generator 状态
    rng.bit_generator.state = create_rng(seed).bit_generator.state
    return rng


def split_rng(rng: np.random.Generator, num: int) -> List[np.random.Generator]:
    """Split an RNG into `num` independent generators."""
    if num <= 0:
        raise ValueError("num must be positive")
    # 基于底层 SeedSequence.spawn 派生彼此独立的子生成器
    seeds = rng.bit_generator.seed_seq.spawn(num)
    return [np.random.default_rng(seed) for seed in seeds]
