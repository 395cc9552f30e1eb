"""
どこで: `util.constants`。
何を: ウィンドウ/フレームレートの既定値。
"""

DEFAULT_WINDOW_SIZE: tuple[int, int] = (1280, 720)
DEFAULT_FPS: int = 60
DEFAULT_CAPTION: str = "Double Pendulum"
DEFAULT_BACKGROUND: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
