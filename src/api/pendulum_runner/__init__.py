"""
どこで: `api.pendulum_runner` サブパッケージ。
何を: `api.pendulum.run_pendulum` の補助（設定解決の純関数・ウィンドウ/描画面の初期化）。
なぜ: ランナー本体を薄く保ち、ウィンドウ無しで検証できる部分を分離するため。
"""
