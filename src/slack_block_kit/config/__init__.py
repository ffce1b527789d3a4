"""設定管理モジュール"""

from slack_block_kit.config.app import AppConfig, load_app_config
from slack_block_kit.config.config import Config, load_config
from slack_block_kit.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
