"""
どこで: `engine.render` サブパッケージ。
何を: `Surface` 契約の ModernGL 実装（CanvasSurface/LineMesh/Shader/ストローク分割）を提供。
なぜ: 運動学（core）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
