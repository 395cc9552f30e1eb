"""
どこで: `engine.core` サブパッケージ。
何を: 幾何（Point/rotate）・振り子アニメータ・フレーム駆動（FrameScheduler/AnimationLoop）・描画面契約・描画ウィンドウ。
なぜ: 運動学と描画の基盤を構成し、上位層（render/api）から再利用可能にするため。
"""
