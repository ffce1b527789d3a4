"""Slack Block Kitのレイアウトブロック"""

import logging
from collections.abc import Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from slack_block_kit.base import BlockId, BlockKitModel, check_any_present, cross_field_error, get_field, text_max_length
from slack_block_kit.elements import MULTI_SELECT_ELEMENTS, ActionElement, Element, ImageElement, InputElement
from slack_block_kit.objects import MarkdownText, PlainText, TaggedPlainText, TextObject

logger = logging.getLogger(__name__)

# 検証コンテキストのキー
STRICT_ACTIONS_ELEMENTS = "strict_actions_elements"

SectionText = Annotated[TextObject, text_max_length(3000)]
SectionFields = Annotated[list[Annotated[TextObject, text_max_length(2000)]], Field(min_length=1, max_length=10)]


class _Block(BlockKitModel):
    # 省略時はSlack側で生成される
    block_id: BlockId | None = None


class TextSectionBlock(_Block):
    """textを持つsectionブロック（fieldsは任意）"""

    type: Literal["section"] = "section"
    text: SectionText
    fields: SectionFields | None = None
    accessory: Element | None = None


class FieldsSectionBlock(_Block):
    """fieldsのみでも成立するsectionブロック（textは任意）"""

    type: Literal["section"] = "section"
    text: SectionText | None = None
    fields: SectionFields
    accessory: Element | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_content(cls, data: Any) -> Any:
        return check_any_present(data, ("text", "fields"), "section block")


class InputBlock(_Block):
    """inputブロック"""

    type: Literal["input"] = "input"
    label: Annotated[TaggedPlainText, text_max_length(2000)]
    element: InputElement
    hint: Annotated[TaggedPlainText, text_max_length(2000)] | None = None
    # 未指定時はfalse
    optional: bool | None = None


class ImageBlock(_Block):
    """imageブロック"""

    type: Literal["image"] = "image"
    image_url: str = Field(max_length=3000)
    alt_text: str = Field(max_length=2000)
    title: Annotated[TaggedPlainText, text_max_length(2000)] | None = None


class FileBlock(_Block):
    """リモートファイルを表示するfileブロック"""

    type: Literal["file"] = "file"
    external_id: str
    # 現状は常にremote
    source: Literal["remote"] = "remote"


class DividerBlock(_Block):
    """dividerブロック"""

    type: Literal["divider"] = "divider"


ContextElement = Annotated[ImageElement | PlainText | MarkdownText, Field(discriminator="type")]


class ContextBlock(_Block):
    """画像とテキストを並べるcontextブロック（最大10要素）"""

    type: Literal["context"] = "context"
    elements: list[ContextElement] = Field(min_length=1, max_length=10)


class ActionsBlock(_Block):
    """インタラクティブ要素を並べるactionsブロック（最大5要素）"""

    type: Literal["actions"] = "actions"
    elements: list[ActionElement] = Field(min_length=1, max_length=5)

    @model_validator(mode="after")
    def _check_multi_select(self, info: ValidationInfo) -> "ActionsBlock":
        # multi select要素をactionsブロックに置けるかはSlackのドキュメント上も曖昧
        multi_selects = [e for e in self.elements if isinstance(e, MULTI_SELECT_ELEMENTS)]
        if not multi_selects:
            return self

        strict = bool(info.context and info.context.get(STRICT_ACTIONS_ELEMENTS))
        if strict:
            raise PydanticCustomError(
                "unsupported_element",
                "actions block does not accept multi select elements: {types}",
                {"types": ", ".join(e.type for e in multi_selects)},
            )
        logger.warning(
            "actions block contains multi select elements (%s); Slack may reject this payload",
            ", ".join(e.type for e in multi_selects),
        )
        return self


def block_tag(value: Any) -> str | None:
    """ブロックのunionを解決するタグを返す

    sectionはtextが無い場合にfieldsのみの形として扱う。
    """
    block_type = get_field(value, "type")
    if block_type == "section" and get_field(value, "text") is None:
        return "section:fields"
    return block_type


SectionBlock = Annotated[
    Union[
        Annotated[TextSectionBlock, Tag("section")],
        Annotated[FieldsSectionBlock, Tag("section:fields")],
    ],
    Discriminator(block_tag),
]

Block = Annotated[
    Union[
        Annotated[TextSectionBlock, Tag("section")],
        Annotated[FieldsSectionBlock, Tag("section:fields")],
        Annotated[InputBlock, Tag("input")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[FileBlock, Tag("file")],
        Annotated[DividerBlock, Tag("divider")],
        Annotated[ContextBlock, Tag("context")],
        Annotated[ActionsBlock, Tag("actions")],
    ],
    Discriminator(block_tag),
]


def check_unique_block_ids(blocks: Sequence[Any]) -> None:
    """同じサーフェス内でblock_idが重複していないことを検証する"""
    seen: set[str] = set()
    for block in blocks:
        if block.block_id is None:
            continue
        if block.block_id in seen:
            raise cross_field_error("block_id '{block_id}' is used more than once", {"block_id": block.block_id})
        seen.add(block.block_id)
