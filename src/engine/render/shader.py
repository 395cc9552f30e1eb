"""
どこで: `engine.render` のシェーダ定義。
何を: ピクセル座標の三角形を正射影し、単色で塗る最小の GLSL プログラムを生成する。
なぜ: ストロークは CPU で三角形化済みのため、GPU 側は射影と塗りだけで足りる。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(mgl_context: Any) -> Any:
        """ストローク用のプログラム（uniform: `projection`, `color`）を返す。"""
        return mgl_context.program(
            vertex_shader=VERTEX_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )


__all__ = ["Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]
