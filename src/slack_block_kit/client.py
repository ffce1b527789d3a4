"""検証済みのペイロードをSlack APIに送るクライアントクラス"""

import logging

from slack_sdk.web.async_client import AsyncWebClient

from slack_block_kit.config import Config
from slack_block_kit.exceptions import SlackAPIError
from slack_block_kit.messages import BlocksMessage, LegacyMessage
from slack_block_kit.payload import to_payload
from slack_block_kit.views import HomeView, ModalView

logger = logging.getLogger(__name__)


class SlackClient:
    """Block Kitのメッセージやビューを投稿するクライアントクラス"""

    def __init__(self, client: AsyncWebClient) -> None:
        """依存注入でAsyncWebClientを受け取る"""
        self._client = client

    async def post_message(self, channel_id: str, message: BlocksMessage | LegacyMessage) -> str:
        """メッセージを投稿する

        Args:
            channel_id: 投稿先のチャンネルID
            message: 投稿するメッセージ（thread_tsを指定すればスレッド返信になる）

        Returns:
            str: 投稿されたメッセージのタイムスタンプ（ts）

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        response = await self._client.chat_postMessage(channel=channel_id, **to_payload(message))

        if not response.get("ok"):
            error_code = response.get("error", "unknown_error")
            logger.error("chat.postMessage failed: channel=%s, error=%s", channel_id, error_code)
            raise SlackAPIError(f"Failed to post message: {error_code}", error_code)

        logger.info("Posted message: channel=%s, ts=%s", channel_id, response["ts"])
        return response["ts"]

    async def publish_home(self, user_id: str, view: HomeView) -> str:
        """ホームタブのビューを公開する

        Returns:
            str: 公開されたビューのID

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        response = await self._client.views_publish(user_id=user_id, view=to_payload(view))

        if not response.get("ok"):
            error_code = response.get("error", "unknown_error")
            logger.error("views.publish failed: user=%s, error=%s", user_id, error_code)
            raise SlackAPIError(f"Failed to publish home view: {error_code}", error_code)

        return response["view"]["id"]

    async def open_modal(self, trigger_id: str, view: ModalView) -> str:
        """モーダルを開く

        Returns:
            str: 開いたビューのID

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        response = await self._client.views_open(trigger_id=trigger_id, view=to_payload(view))

        if not response.get("ok"):
            error_code = response.get("error", "unknown_error")
            logger.error("views.open failed: error=%s", error_code)
            raise SlackAPIError(f"Failed to open modal: {error_code}", error_code)

        return response["view"]["id"]


def create_client(config: Config) -> SlackClient:
    """設定のトークンでSlackClientを作成する"""
    return SlackClient(AsyncWebClient(token=config.slack_bot_token))
