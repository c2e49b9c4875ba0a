"""Shared utility helpers used across the core library."""

from .math_utils import (
    empirical_moments,
    stable_mean,
    stable_variance,
)
from .random import (
    create_rng,
    reseed_rng,
    split_rng,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "empirical_moments",
    "stable_mean",
    "stable_variance",
    "create_rng",
    "reseed_rng",
    "split_rng",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "validate_arguments",
    "ParamValidationError",
]
