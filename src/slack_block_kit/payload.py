"""ペイロードの検証とシリアライズ

dictで受け取ったペイロードをモデルに変換する関数と、モデルをSlack APIに渡す
dictに変換する関数を提供する。
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from slack_block_kit.blocks import STRICT_ACTIONS_ELEMENTS, Block
from slack_block_kit.elements import ExternalSelectResponse, OptionGroupsResponse, OptionsResponse
from slack_block_kit.exceptions import PayloadValidationError
from slack_block_kit.messages import ALLOW_MIXED_ATTACHMENTS, BlocksMessage, LegacyMessage, Message
from slack_block_kit.views import HomeView, ModalView, View

logger = logging.getLogger(__name__)

T = TypeVar("T")

_message_adapter: TypeAdapter[BlocksMessage | LegacyMessage] = TypeAdapter(Message)
_view_adapter: TypeAdapter[ModalView | HomeView] = TypeAdapter(View)
_blocks_adapter: TypeAdapter[list[Any]] = TypeAdapter(list[Block])
_external_select_response_adapter: TypeAdapter[OptionsResponse | OptionGroupsResponse] = TypeAdapter(
    ExternalSelectResponse
)


class ValidationOptions(BaseModel, frozen=True, extra="forbid"):
    """スキーマ上の曖昧な点をどう扱うかの設定"""

    # trueならactionsブロック内のmulti select要素をエラーにする（falseなら警告ログのみ）
    strict_actions_elements: bool = False
    # trueならblocksとtextを併せ持つアタッチメントを警告ログのみで受け入れる
    allow_mixed_attachments: bool = False

    def as_context(self) -> dict[str, bool]:
        """pydanticの検証コンテキストに変換する"""
        return {
            STRICT_ACTIONS_ELEMENTS: self.strict_actions_elements,
            ALLOW_MIXED_ATTACHMENTS: self.allow_mixed_attachments,
        }


def _validate(adapter: TypeAdapter[T], data: Any, entity: str, options: ValidationOptions | None) -> T:
    options = options or ValidationOptions()
    try:
        result = adapter.validate_python(data, context=options.as_context())
    except ValidationError as e:
        logger.debug("Rejected %s payload with %d error(s)", entity, e.error_count())
        raise PayloadValidationError(entity, e.errors(include_url=False), data) from e
    logger.debug("Validated %s payload", entity)
    return result


def parse_message(data: Any, options: ValidationOptions | None = None) -> BlocksMessage | LegacyMessage:
    """dictからメッセージを検証して生成する

    Args:
        data: メッセージのペイロード
        options: 検証オプション（Noneならデフォルト）

    Returns:
        BlocksMessage | LegacyMessage: 検証済みのメッセージ

    Raises:
        PayloadValidationError: ペイロードがスキーマを満たさない場合
    """
    return _validate(_message_adapter, data, "message", options)


def parse_view(data: Any, options: ValidationOptions | None = None) -> ModalView | HomeView:
    """dictからビューを検証して生成する

    Raises:
        PayloadValidationError: ペイロードがスキーマを満たさない場合
    """
    return _validate(_view_adapter, data, "view", options)


def parse_blocks(data: Any, options: ValidationOptions | None = None) -> list[Any]:
    """ブロック配列を検証して生成する

    Raises:
        PayloadValidationError: ペイロードがスキーマを満たさない場合
    """
    return _validate(_blocks_adapter, data, "blocks", options)


def parse_external_select_response(data: Any) -> OptionsResponse | OptionGroupsResponse:
    """外部データソースが返す選択肢レスポンスを検証して生成する"""
    return _validate(_external_select_response_adapter, data, "external select response", None)


def to_payload(model: BaseModel) -> dict[str, Any]:
    """モデルをSlack APIに渡すdictに変換する

    未指定（None）のフィールドは出力しない。明示的に指定した値はデフォルトと同じでも出力する。
    """
    return model.model_dump(mode="json", exclude_none=True)


def blocks_to_payload(blocks: list[Any]) -> list[dict[str, Any]]:
    """ブロック配列をSlack APIに渡すdictのリストに変換する"""
    return [to_payload(block) for block in blocks]
