"""
どこで: `scrollwave.common` パッケージ。
何を: 環境変数パース・型付き設定・ロギング初期化などエンジン非依存の共通基盤。
なぜ: エンジン/CLI の双方から再利用し、依存の向きを単純化するため。
"""
