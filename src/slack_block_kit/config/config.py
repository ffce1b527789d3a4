"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_block_kit.config.app import AppConfig, load_app_config
from slack_block_kit.config.env import load_env_config
from slack_block_kit.payload import ValidationOptions


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_bot_token: str = Field(..., description="Slack Bot User OAuth Token (xoxb-)")

    # config.yaml由来
    app: AppConfig = Field(default_factory=AppConfig, description="検証オプション")

    model_config = {"extra": "forbid"}

    @property
    def validation_options(self) -> ValidationOptions:
        """ペイロード検証用のオプション"""
        return self.app.to_validation_options()


def load_config(config_path: Path) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 必須の環境変数が欠けている場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path)

    return Config(slack_bot_token=env_config.slack_bot_token, app=app_config)
