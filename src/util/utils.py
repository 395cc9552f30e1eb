"""
どこで: `util.utils`。
何を: YAML 構成（`configs/default.yaml` + ルート `config.yaml`）をフェイルソフトに読み込む。
なぜ: ウィンドウ寸法/FPS/色/振り子定数を、コードを変えずに差し替えられるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# 後ろほど優先（トップレベルのキー単位で上書き）
CONFIG_FILES = (Path("configs") / "default.yaml", Path("config.yaml"))
_ROOT_MARKERS = (".git", "pyproject.toml", "configs")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """YAML を辞書として読む。読めない/辞書でない場合は空辞書。"""
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as e:
        logger.debug("config load failed: %s (%s)", path, e)
        return {}
    if not isinstance(data, dict):
        logger.debug("config ignored (top level is %s): %s", type(data).__name__, path)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`.git`/`pyproject.toml`/`configs` のいずれかを持つ最初のディレクトリを返す。

    どれも無ければ `start` の 2 つ上（`<root>/src/util` → `<root>`）。
    """
    here = start.resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """`CONFIG_FILES` を順に読み、トップレベルで上書きマージした辞書を返す。

    - ネストした辞書は丸ごと置き換える（ディープマージしない）。
    - ファイルが無い/壊れている場合はその分を飛ばす。全滅なら `{}`。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in CONFIG_FILES:
        path = project_root / rel
        if path.is_file():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(cfg: Dict[str, Any] | None, name: str) -> Dict[str, Any]:
    """トップレベルのセクションを辞書として返す（無い/型違いは空辞書）。"""
    if not isinstance(cfg, dict):
        return {}
    section = cfg.get(name)
    return section if isinstance(section, dict) else {}


__all__ = ["CONFIG_FILES", "config_section", "load_config"]
