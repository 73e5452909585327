"""
どこで: `scrollwave.engine.render` サブパッケージ。
何を: オフセット列からホスト向けのスタイル変更命令（compositor-only な transform）を生成。
"""
