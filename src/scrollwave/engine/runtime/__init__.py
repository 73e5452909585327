"""
どこで: `scrollwave.engine.runtime` サブパッケージ。
何を: スクロールイベントの集約とフレーム単位の Animator 駆動を提供。
なぜ: 入力イベントの頻度と描画更新の頻度を切り離し、1 フレーム 1 回の更新に揃えるため。
"""
