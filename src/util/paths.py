"""
どこで: `util.paths`。
何を: スクリーンショット保存先ディレクトリの生成と、重複しない保存パスの解決。
なぜ: ランタイムから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_screenshots_dir(root: Path | None = None) -> Path:
    """スクリーンショット出力先 `data/screenshot/` を作成して返す。

    - プロジェクトルート直下に作成する（既存ならそのまま返す）。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "screenshot"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """既存ファイルと衝突する場合は `_1`, `_2`, ... を付けたパスを返す。"""
    if not path.exists():
        return path
    i = 1
    while True:
        candidate = path.with_name(f"{path.stem}_{i}{path.suffix}")
        if not candidate.exists():
            return candidate
        i += 1
