"""Shared pytest configuration, path setup and test doubles for test modules."""

import sys
from dataclasses import fields
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from rlmath.core.utils.config import get_config  # noqa: E402


class ScriptedSource:
    """Uniform source double replaying a fixed list of raw draws (cycling)."""
    # 按顺序循环返回预设的原始抽样值，并记录已消耗的次数，便于断言采样算法的取数行为

    def __init__(self, draws: Iterable[int], range_max: int = 4):
        self._draws: List[int] = list(draws)
        self.range_max = range_max
        self.calls = 0

    def draw(self) -> int:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_source():
    # 工厂夹具：scripted_source([3, 1], range_max=4)
    return ScriptedSource


@pytest.fixture
def restore_config():
    # 测试结束后恢复全局 RuntimeConfig，避免 configure(...) 的修改在测试间泄漏
    config = get_config()
    snapshot = {f.name: getattr(config, f.name) for f in fields(config)}
    yield
    for name, value in snapshot.items():
        setattr(config, name, value)
