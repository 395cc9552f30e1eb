from __future__ import annotations

from api import PendulumConfig, run
from common.logging import setup_default_logging

# 既定より細い線・速い第2腕のデモ
CONFIG = PendulumConfig(stroke_width=8, second_rate=0.08)


if __name__ == "__main__":
    setup_default_logging("INFO")
    run(width=900, height=900, config=CONFIG, background="#101014")
