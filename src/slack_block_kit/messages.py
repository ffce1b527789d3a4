"""メッセージとセカンダリアタッチメント

メッセージはblocksを持つ形と、textとattachmentsを持つ旧来の形のどちらか一方。
アタッチメントも同様に、blocksを持つ形とtext/fallbackを持つ旧来の形に分かれる。
"""

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from slack_block_kit.base import BlockKitModel, check_any_present, check_exactly_one, get_field
from slack_block_kit.blocks import Block, check_unique_block_ids

logger = logging.getLogger(__name__)

# 検証コンテキストのキー
ALLOW_MIXED_ATTACHMENTS = "allow_mixed_attachments"

# good / warning / danger または #439FE0 のような16進カラーコード
AttachmentColor = Annotated[str, Field(pattern=r"^(good|warning|danger|#[0-9A-Fa-f]{6})$")]


class FieldObject(BlockKitModel):
    """アタッチメント内に表形式で表示されるフィールド"""

    title: str | None = None
    value: str | None = None
    # 未指定時はfalse
    short: bool | None = None


class _AttachmentBase(BlockKitModel):
    color: AttachmentColor | None = None
    author_icon: str | None = None
    author_link: str | None = None
    author_name: str | None = None
    fields: list[FieldObject] | None = None
    footer: Annotated[str, Field(max_length=300)] | None = None
    footer_icon: str | None = None
    image_url: str | None = None
    mrkdwn_in: list[Literal["pretext", "text", "fields"]] | None = None
    pretext: str | None = None
    thumb_url: str | None = None
    title: str | None = None
    title_link: str | None = None
    # Unixタイムスタンプ（秒）
    ts: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_image(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("image_url") is not None and data.get("thumb_url") is not None:
            raise PydanticCustomError(
                "mutually_exclusive",
                "attachment accepts either image_url or thumb_url, not both",
            )
        return data


class TextAttachment(_AttachmentBase):
    """textを持つ旧来のアタッチメント（fallbackは任意）"""

    text: str
    fallback: str | None = None


class FallbackAttachment(_AttachmentBase):
    """fallbackを持つ旧来のアタッチメント（textは任意）"""

    fallback: str
    text: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_content(cls, data: Any) -> Any:
        return check_any_present(data, ("text", "fallback"), "attachment")


class BlocksAttachment(_AttachmentBase):
    """blocksを持つアタッチメント"""

    blocks: list[Block] = Field(min_length=1, max_length=50)
    fallback: str | None = None
    text: str | None = None

    @model_validator(mode="after")
    def _check_mixed_shape(self, info: ValidationInfo) -> "BlocksAttachment":
        legacy_fields = [name for name in ("text", "fallback") if getattr(self, name) is not None]
        if not legacy_fields:
            return self

        if info.context and info.context.get(ALLOW_MIXED_ATTACHMENTS):
            logger.warning(
                "attachment has both blocks and legacy %s; Slack renders only the blocks",
                "/".join(legacy_fields),
            )
            return self
        raise PydanticCustomError(
            "mutually_exclusive",
            "attachment accepts either blocks or legacy {fields}, not both",
            {"fields": "/".join(legacy_fields)},
        )

    @model_validator(mode="after")
    def _check_block_ids(self) -> "BlocksAttachment":
        check_unique_block_ids(self.blocks)
        return self


def attachment_tag(value: Any) -> str:
    """アタッチメントのunionを解決するタグを返す"""
    if get_field(value, "blocks") is not None:
        return "blocks"
    if get_field(value, "text") is not None:
        return "text"
    return "fallback"


LegacyAttachment = Annotated[
    Union[
        Annotated[TextAttachment, Tag("text")],
        Annotated[FallbackAttachment, Tag("fallback")],
    ],
    Discriminator(attachment_tag),
]

Attachment = Annotated[
    Union[
        Annotated[BlocksAttachment, Tag("blocks")],
        Annotated[TextAttachment, Tag("text")],
        Annotated[FallbackAttachment, Tag("fallback")],
    ],
    Discriminator(attachment_tag),
]


class _MessageBase(BlockKitModel):
    # 返信先の親メッセージのts
    thread_ts: str | None = None
    # 未指定時はtrue
    mrkdwn: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_body(cls, data: Any) -> Any:
        return check_exactly_one(data, "blocks", "attachments", "message")


class BlocksMessage(_MessageBase):
    """blocksを持つメッセージ

    textは通知などで使われるフォールバック文字列（任意だが指定を推奨）。
    """

    text: str | None = None
    blocks: list[Block] = Field(min_length=1, max_length=50)

    @model_validator(mode="after")
    def _check_block_ids(self) -> "BlocksMessage":
        check_unique_block_ids(self.blocks)
        return self


class LegacyMessage(_MessageBase):
    """textとattachmentsを持つ旧来のメッセージ"""

    text: str
    attachments: list[Attachment] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_block_ids(self) -> "LegacyMessage":
        # block_idはアタッチメントをまたいでメッセージ全体で一意
        check_unique_block_ids(
            [
                block
                for attachment in self.attachments
                if isinstance(attachment, BlocksAttachment)
                for block in attachment.blocks
            ]
        )
        return self


def message_tag(value: Any) -> str:
    """メッセージのunionを解決するタグを返す"""
    return "blocks" if get_field(value, "blocks") is not None else "legacy"


Message = Annotated[
    Union[
        Annotated[BlocksMessage, Tag("blocks")],
        Annotated[LegacyMessage, Tag("legacy")],
    ],
    Discriminator(message_tag),
]
