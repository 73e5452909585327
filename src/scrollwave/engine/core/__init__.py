"""
どこで: `scrollwave.engine.core` サブパッケージ。
何を: 登録設定・要素モデル・位相表・フレーム計測・Animator・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 描画環境に依存しない計算の基盤を構成し、上位層（Monitor/Render/Runtime）から再利用するため。
"""
