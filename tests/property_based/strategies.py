"""
Hypothesis strategies shared by the property-based tests.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成有限浮点数与有序的区间上下界
# - 生成合法的 spread / stddev 参数
# - 暴露稳定的 RNG 种子生成策略以支持可复现性测试

from hypothesis import strategies as st


# ------------------------------------------------------------------ Basic Types
@st.composite
def finite_floats(draw, bound=1e6):
    # 生成有限浮点数，避免溢出导致区间长度变为无穷
    return draw(
        st.floats(min_value=-bound,
                  max_value=bound,
                  allow_nan=False,
                  allow_infinity=False))


@st.composite
def ordered_bounds(draw):
    # 生成满足 lo <= hi 的区间上下界
    a = draw(finite_floats())
    b = draw(finite_floats())
    return (a, b) if a <= b else (b, a)


@st.composite
def ordered_int_bounds(draw):
    a = draw(st.integers(min_value=-10**9, max_value=10**9))
    b = draw(st.integers(min_value=-10**9, max_value=10**9))
    return (a, b) if a <= b else (b, a)


@st.composite
def spreads(draw):
    # 生成采样宽度参数，允许负值（支撑按 |spread| 计算）
    return draw(
        st.floats(min_value=-100.0,
                  max_value=100.0,
                  allow_nan=False,
                  allow_infinity=False))


@st.composite
def stddevs(draw):
    # 生成严格为正的标准差
    return draw(
        st.floats(min_value=1e-3,
                  max_value=1e3,
                  allow_nan=False,
                  allow_infinity=False))


# ------------------------------------------------------------------ Helper objects
@st.composite
def seeds(draw):
    # 提供整数种子，用于初始化随机源以进行可复现性验证
    return draw(st.integers(min_value=0, max_value=2**32 - 1))
