"""Numeric primitives for learning code: validity checks, ranges, signs and sampling."""

from __future__ import annotations

from .core import (
    BoundedRange,
    NumpyUniformSource,
    ParamValidationError,
    RandomSampler,
    SamplerPool,
    configure,
    get_config,
    is_valid,
    sign,
)

__version__ = "0.1.0"

__all__ = [
    "BoundedRange",
    "NumpyUniformSource",
    "ParamValidationError",
    "RandomSampler",
    "SamplerPool",
    "configure",
    "get_config",
    "is_valid",
    "sign",
    "__version__",
]
