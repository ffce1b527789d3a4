"""Block Kitのコンポジションオブジェクト

テキスト、確認ダイアログ、選択肢、選択肢グループ、会話フィルタを定義する。
他のモジュールに依存しない最下層のモデル群。
"""

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import BeforeValidator, Field, field_validator

from slack_block_kit.base import BlockKitModel, check_text_length, require_type_tag, text_max_length


class PlainText(BlockKitModel):
    """plain_textテキストオブジェクト"""

    type: Literal["plain_text"] = "plain_text"
    text: str = Field(min_length=1)
    # 絵文字をコロン記法にエスケープするか
    emoji: bool | None = None


class MarkdownText(BlockKitModel):
    """mrkdwnテキストオブジェクト"""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: str = Field(min_length=1)
    # trueならURLやメンションの自動変換を行わない（未指定時はfalse）
    verbatim: bool | None = None


# dictから検証するときはtypeの省略を許さないplain_text
TaggedPlainText = Annotated[PlainText, BeforeValidator(require_type_tag)]
TextObject = Annotated[PlainText | MarkdownText, Field(discriminator="type")]


class ConfirmObject(BlockKitModel):
    """インタラクティブ要素に付ける確認ダイアログ"""

    title: Annotated[TaggedPlainText, text_max_length(100)]
    text: Annotated[TextObject, text_max_length(300)]
    confirm: Annotated[TaggedPlainText, text_max_length(30)]
    deny: Annotated[TaggedPlainText, text_max_length(30)]
    # 未指定時はprimary
    style: Literal["primary", "danger"] | None = None


ConversationType = Literal["im", "mpim", "private", "public"]


class FilterObject(BlockKitModel):
    """会話選択メニューの候補を絞り込むフィルタ"""

    include: Annotated[list[ConversationType], Field(min_length=1)] | None = None
    # 未指定時はfalse
    exclude_external_shared_channels: bool | None = None
    # 未指定時はfalse
    exclude_bot_users: bool | None = None


TextT = TypeVar("TextT")


class OptionObject(BlockKitModel, Generic[TextT]):
    """選択肢オブジェクト

    select / overflow メニューはplain_textのみ、radio buttons / checkboxesはmrkdwnも使える。
    どちらを許すかは型パラメータで指定する。
    """

    text: TextT
    value: str = Field(max_length=75)

    @field_validator("text")
    @classmethod
    def _check_text_length(cls, value: TextT) -> TextT:
        check_text_length(value, 75)  # type: ignore[arg-type]
        return value


PlainTextOption = OptionObject[TaggedPlainText]
MixedTextOption = OptionObject[TextObject]


class OverflowOption(OptionObject[TaggedPlainText]):
    """overflowメニューの選択肢"""

    url: Annotated[str, Field(max_length=3000)] | None = None


class RadioButtonOption(OptionObject[TextObject]):
    """radio buttonsの選択肢"""

    description: Annotated[TaggedPlainText, text_max_length(75)] | None = None


OptionT = TypeVar("OptionT", bound=OptionObject)


class OptionGroup(BlockKitModel, Generic[OptionT]):
    """ラベル付きの選択肢グループ"""

    label: Annotated[TaggedPlainText, text_max_length(75)]
    options: list[OptionT] = Field(min_length=1, max_length=100)


PlainTextOptionGroup = OptionGroup[PlainTextOption]
