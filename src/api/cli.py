"""
どこで: `api.cli`（コンソールスクリプト `pendraw`）。
何を: 引数を解釈し、ロギングを整えてから `run_pendulum` を起動する。
なぜ: ウィンドウ寸法/FPS/色をコード変更なしで切り替えられるようにするため。
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from common.logging import setup_default_logging
from common.settings import LOG_LEVELS
from common.settings import get as get_settings
from engine.core.surface import SurfaceError

from .pendulum import run_pendulum

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pendraw",
        description="Kinematic double pendulum animation (ESC: quit, P: screenshot).",
    )
    p.add_argument("--width", type=int, default=None, help="window width in px")
    p.add_argument("--height", type=int, default=None, help="window height in px")
    p.add_argument("--fps", type=int, default=None, help="refresh rate (default: config or 60)")
    p.add_argument("--caption", default=None)
    p.add_argument("--background", default=None, help="background color, e.g. #FFFFFF")
    p.add_argument("--line-color", default=None, help="line color, e.g. #000000")
    p.add_argument(
        "--log-level",
        choices=[lvl.lower() for lvl in LOG_LEVELS] + list(LOG_LEVELS),
        default=None,
        help="logging level (default: PENDRAW_LOG_LEVEL or INFO)",
    )
    p.add_argument(
        "--init-only",
        action="store_true",
        help="resolve configuration and exit without opening a window",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or get_settings().LOG_LEVEL)
    options = dict(
        width=args.width,
        height=args.height,
        fps=args.fps,
        caption=args.caption,
        background=args.background,
        line_color=args.line_color,
    )
    # 引数/設定の検証はウィンドウを開く前に済ませる（終了コード 2 はこの段階に限る）
    try:
        animator = run_pendulum(**options, init_only=True)
    except ValueError as e:
        logger.error("invalid argument: %s", e)
        return 2
    if args.init_only:
        logger.info("init only: %s", animator.config)
        return 0

    try:
        run_pendulum(**options)
    except SurfaceError as e:
        logger.error("cannot start animation: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
