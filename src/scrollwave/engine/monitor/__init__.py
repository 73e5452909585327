"""
どこで: `scrollwave.engine.monitor` サブパッケージ。
何を: フレーム計測集計の報告先（ログ/捕捉/psutil によるプロセスメトリクス）を提供。
"""
