"""
どこで: `scrollwave.engine` パッケージ。
何を: core（計算）/ monitor（計測報告）/ render（スタイル命令）/ runtime（フレーム駆動）。
"""
