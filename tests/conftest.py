"""共通フィクスチャ。

- 呼び出しを記録する描画面
- 手動発火スケジューラ/手動時計
- 既定構成の振り子アニメータ
"""

from __future__ import annotations

import pytest

from engine.core.pendulum import PendulumAnimator
from tests._utils.dummies import DummyContext, FakeClock, FakeScheduler, RecordingSurface


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface(800, 600)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def animator() -> PendulumAnimator:
    return PendulumAnimator()


@pytest.fixture()
def gl_ctx() -> DummyContext:
    return DummyContext()
