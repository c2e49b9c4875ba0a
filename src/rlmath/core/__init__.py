"""Entry point for the core numeric primitives."""

from __future__ import annotations

from .bounded_range import BoundedRange
from .sampling import (
    IRWIN_HALL_TERMS,
    RANGE_MAX,
    NumpyUniformSource,
    RandomSampler,
    SamplerPool,
    UniformSource,
)
from .signum import Signum, sign
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)
from .validity import Boundedness, ensure_valid, is_valid

__all__ = [
    "BoundedRange",
    "Boundedness",
    "IRWIN_HALL_TERMS",
    "NumpyUniformSource",
    "ParamValidationError",
    "RANGE_MAX",
    "RandomSampler",
    "RuntimeConfig",
    "SamplerPool",
    "Signum",
    "UniformSource",
    "configure",
    "ensure_valid",
    "get_config",
    "get_logger",
    "is_valid",
    "sign",
]
