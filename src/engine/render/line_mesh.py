"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/VAO の確保・更新・解放を担当し、三角形化済みストロークを描画可能な LineMesh として管理。
なぜ: GPU 転送の詳細を描画面から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class LineMesh:
    """
    GPUにストロークの頂点データを送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 振り子 2 本分なら数 KB で足りる。必要に応じて自動拡張。
        initial_reserve: int = 64 * 1024,
    ):
        """
        ctx: GPUへの描画処理を行うためのモダンOpenGL（moderngl）コンテキスト
        program: GPU側で使うシェーダープログラム（入力 `in_vert: vec2`）。
        VBO (Vertex Buffer Object): GPUに送る「頂点データ」を格納するメモリ。
        VAO (Vertex Array Object): VBOとプログラム入力を関連付けて、描画命令を簡潔にする仕組み。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()

        # 描画ステート
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(self.program, [(self.vbo, "2f", "in_vert")])

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったらGPUのバッファを再確保"""
        if vbo_size <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve), dynamic=True)
        # VAO は VBO が差し替わるたびに張り直す
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """(K, 2) float32 の三角形頂点をGPUへ送り込む"""
        verts = np.ascontiguousarray(vertices, dtype=np.float32).reshape(-1, 2)
        self._ensure_capacity(verts.nbytes)
        self.vbo.orphan()
        if verts.nbytes:
            self.vbo.write(verts.tobytes())
        self.vertex_count = int(verts.shape[0])

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
