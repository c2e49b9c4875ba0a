"""
Runtime configuration utilities.

Centralises the library's tunable options (validation strictness, logging
level, default seed, rejection-loop cap) and exposes helpers to read them
from environment variables or update them at runtime.
"""
# 说明：运行时配置管理工具，集中管理库内可调选项，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装严格校验开关、日志等级、默认随机种子、拒绝采样循环上限等配置项
# - load_from_env(...)：按统一前缀（如 RLMATH_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为库级默认配置入口
# - configure(...)：通过关键字参数便捷更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - RNG_SEED 环境变量会被解析为整数
# - MAX_REJECTIONS 为 "0" / "none" 时表示取消循环上限
# - 未知配置键在 update(...) 中会触发 AttributeError，避免静默吞错

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

DEFAULT_MAX_REJECTIONS = 10_000


def _parse_cap(value: str) -> Optional[int]:
    # 将上限字符串解析为正整数；0 或 none 表示不设上限
    if value.strip().lower() in {"", "none", "0"}:
        return None
    cap = int(value)
    if cap < 0:
        raise ValueError("MAX_REJECTIONS must be non-negative")
    return cap


@dataclass
class RuntimeConfig:
    strict_validation: bool = True
    log_level: str = field(default_factory=lambda: os.environ.get("RLMATH_LOG_LEVEL", "INFO"))
    rng_seed: Optional[int] = None
    max_rejections: Optional[int] = DEFAULT_MAX_REJECTIONS
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "RLMATH_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for key in ("STRICT_VALIDATION", "LOG_LEVEL", "RNG_SEED", "MAX_REJECTIONS"):
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue  # 未设置对应环境变量时保持当前配置值不变
            raw = os.environ[env_key]
            value: Any = raw
            if key == "STRICT_VALIDATION":
                value = raw.lower() in {"1", "true", "yes"}
            elif key == "RNG_SEED":
                value = int(raw)
            elif key == "MAX_REJECTIONS":
                value = _parse_cap(raw)
            setattr(self, key.lower(), value)


# 全局配置单例，用作库内默认的运行时配置
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供调用方读取或在本进程内共享配置
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
