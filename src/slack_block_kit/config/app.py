"""検証オプションのアプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_block_kit.payload import ValidationOptions


class AppConfig(BaseModel):
    """アプリケーション設定"""

    strict_actions_elements: bool = Field(
        default=False,
        description="actionsブロック内のmulti select要素をエラーにするか",
    )
    allow_mixed_attachments: bool = Field(
        default=False,
        description="blocksとtextを併せ持つアタッチメントを警告のみで受け入れるか",
    )

    model_config = {"extra": "forbid"}

    def to_validation_options(self) -> ValidationOptions:
        """ペイロード検証用のオプションに変換する"""
        return ValidationOptions(
            strict_actions_elements=self.strict_actions_elements,
            allow_mixed_attachments=self.allow_mixed_attachments,
        )


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定（空ファイルならデフォルト値）

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Config file must contain a mapping: {config_path}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
