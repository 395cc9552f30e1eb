from __future__ import annotations

from pathlib import Path

from util.paths import ensure_screenshots_dir, unique_path
from util.utils import _find_project_root, config_section, load_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # 上流に .git/pyproject.toml/configs が無い構造ではフォールバックで start.parent.parent
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    assert _find_project_root(start) == start.resolve().parent.parent


def test_find_project_root_detects_configs_dir(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path.resolve()


def test_load_config_merges_root_override(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "window:\n  width: 640\ncanvas_controller:\n  fps: 30\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("window:\n  height: 480\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["window"] == {"height": 480}
    assert cfg["canvas_controller"] == {"fps": 30}


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("window: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    assert load_config(tmp_path / "missing") == {}


def test_repository_default_config_has_pendulum_section() -> None:
    cfg = load_config()
    pend = config_section(cfg, "pendulum")
    assert pend.get("first_angle") == 270
    assert pend.get("line_cap") == "round"


def test_config_section() -> None:
    assert config_section({"a": {"b": 1}}, "a") == {"b": 1}
    assert config_section({"a": 3}, "a") == {}
    assert config_section(None, "a") == {}


def test_screenshot_dir_and_unique_path(tmp_path: Path) -> None:
    out = ensure_screenshots_dir(tmp_path)
    assert out == tmp_path / "data" / "screenshot"
    assert out.is_dir()
    p = out / "shot.png"
    assert unique_path(p) == p
    p.write_bytes(b"")
    assert unique_path(p) == out / "shot_1.png"
    (out / "shot_1.png").write_bytes(b"")
    assert unique_path(p) == out / "shot_2.png"
