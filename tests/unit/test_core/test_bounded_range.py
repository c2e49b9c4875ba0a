"""
Unit tests for the closed interval type.
"""
# 说明：BoundedRange 的单元测试。
# 覆盖：
# - bound / contains / length / center / min_of / max_of 的基本语义
# - 默认构造与 unbounded(dtype) 的“无界”上下限
# - 整数区间中点按浮点计算
# - 上下界顺序颠倒时结果确定但不报错

import numpy as np
import pytest

from rlmath.core import BoundedRange


def test_bound_clamps_into_interval() -> None:
    rng = BoundedRange(-1.0, 2.0)
    assert rng.bound(-3.0) == -1.0
    assert rng.bound(5.0) == 2.0
    assert rng.bound(0.5) == 0.5
    assert rng.bound(rng.min_of() - 1) == rng.min_of()
    assert rng.bound(rng.max_of() + 1) == rng.max_of()


def test_contains_is_inclusive() -> None:
    rng = BoundedRange(0, 10)
    assert rng.contains(0)
    assert rng.contains(10)
    assert not rng.contains(-1)
    assert 5 in rng
    assert 11 not in rng


def test_length_and_center() -> None:
    rng = BoundedRange(-2.0, 6.0)
    assert rng.length() == 8.0
    assert rng.center() == 2.0


def test_center_of_integral_range_is_not_truncated() -> None:
    rng = BoundedRange[int](0, 3)
    assert rng.length() == 3
    assert rng.center() == pytest.approx(1.5)


def test_default_range_does_not_bound_finite_values() -> None:
    rng = BoundedRange()
    assert rng.min_of() == -np.finfo(np.float64).max
    assert rng.max_of() == np.finfo(np.float64).max
    for value in (-1e300, 0.0, 1e300):
        assert rng.bound(value) == value
        assert rng.contains(value)


def test_unbounded_uses_numpy_type_limits() -> None:
    ints = BoundedRange.unbounded(np.int32)
    assert ints.min_of() == np.iinfo(np.int32).min
    assert ints.max_of() == np.iinfo(np.int32).max
    floats = BoundedRange.unbounded(np.float32)
    # 下界是最负的有限值，而不是最小正规数
    assert floats.min_of() == -np.finfo(np.float32).max
    assert floats.contains(np.float32(0.0))


def test_unbounded_rejects_non_numeric_dtype() -> None:
    with pytest.raises(TypeError):
        BoundedRange.unbounded(np.bool_)


def test_disordered_range_is_deterministic() -> None:
    rng = BoundedRange(5, 1)
    assert not rng.is_ordered()
    # max(minv, min(maxv, value)) 在颠倒时恒返回 minv
    assert rng.bound(3) == 5
    assert rng.bound(-10) == 5
    assert rng.length() == -4
    assert not rng.contains(3)


def test_range_is_immutable() -> None:
    rng = BoundedRange(0.0, 1.0)
    with pytest.raises(AttributeError):
        rng.minv = 2.0  # type: ignore[misc]


@pytest.mark.parametrize("dtype", [np.int8, np.int32, np.int64, np.uint16])
def test_unbounded_integer_length_does_not_wrap(dtype) -> None:
    # 定宽整型的 maxv - minv 超出自身表示范围，长度需按任意精度整数计算
    info = np.iinfo(dtype)
    rng = BoundedRange.unbounded(dtype)
    assert rng.length() == int(info.max) - int(info.min)
    assert rng.length() > 0
    assert rng.center() == pytest.approx((int(info.max) + int(info.min)) / 2.0)


def test_numpy_integer_length_matches_python_ints() -> None:
    rng = BoundedRange(np.int32(-5), np.int32(7))
    assert rng.length() == 12
