"""
Reusable validation helpers and decorators.
"""
# 说明：参数验证相关的辅助函数与装饰器，用于在库内部统一进行轻量级参数检查与转换。
# 职责：
# - ParamValidationError：参数校验失败时抛出的唯一显式异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - validate_arguments：根据 schema 为函数参数应用验证/转换逻辑的装饰器，统一处理位置参数与关键字参数

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and should return the (possibly
    transformed) value or raise ParamValidationError. Arguments left to
    their defaults are not validated.
    """

    def decorator(func: Callable) -> Callable:
        # 预先解析形参顺序，staticmethod / 普通方法（含 self）均可按位置定位
        params = list(inspect.signature(func).parameters)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            mutable = list(args)
            kw = dict(kwargs)
            for name, validator in schema.items():
                if name in kw:
                    kw[name] = validator(kw[name])
                    continue
                if name not in params:
                    continue  # 多余的 schema 条目直接忽略
                index = params.index(name)
                if index >= len(mutable):
                    continue  # 未显式传入（使用默认值），不强制验证
                mutable[index] = validator(mutable[index])
            return func(*mutable, **kw)

        return wrapper

    return decorator
