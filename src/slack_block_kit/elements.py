"""Block Kitのブロック要素

ボタン、セレクトメニュー、入力欄などのインタラクティブ要素と画像要素を定義する。
要素はtypeでタグ付けされたunionとして扱い、static系セレクトはoptionsかoption_groupsの
どちらを持つかで別クラスに分かれる。
"""

from collections.abc import Sequence
from datetime import date
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, field_validator, model_validator

from slack_block_kit.base import (
    ActionId,
    BlockKitModel,
    check_exactly_one,
    cross_field_error,
    get_field,
    tag_by_presence,
    text_max_length,
)
from slack_block_kit.objects import (
    ConfirmObject,
    FilterObject,
    MixedTextOption,
    OverflowOption,
    PlainTextOption,
    PlainTextOptionGroup,
    RadioButtonOption,
    TaggedPlainText,
)

Placeholder = Annotated[TaggedPlainText, text_max_length(150)]


def _ensure_initial_options_match(options: Sequence[Any], initial: Sequence[Any], field_name: str) -> None:
    for option in initial:
        if option not in options:
            msg = "{field} must exactly match one of the options, got value '{value}'"
            raise cross_field_error(msg, {"field": field_name, "value": option.value})


class _Actionable(BlockKitModel):
    # インタラクションの送信元を識別するID（アプリ内で一意にする）
    action_id: ActionId


class _Confirmable(_Actionable):
    confirm: ConfirmObject | None = None


class _OptionalPlaceholder(BlockKitModel):
    placeholder: Placeholder | None = None


class _SelectMenu(_Confirmable):
    placeholder: Placeholder


class _MultiSelectMenu(_SelectMenu):
    max_selected_items: Annotated[int, Field(ge=1)] | None = None


class ButtonElement(_Confirmable):
    """ボタン要素"""

    type: Literal["button"] = "button"
    text: Annotated[TaggedPlainText, text_max_length(75)]
    url: Annotated[str, Field(max_length=3000)] | None = None
    value: Annotated[str, Field(max_length=2000)] | None = None
    style: Literal["primary", "danger"] | None = None


class ImageElement(BlockKitModel):
    """画像要素（action_idを持たない）"""

    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class OverflowElement(_Confirmable):
    """overflowメニュー要素（選択肢は2〜5個）"""

    type: Literal["overflow"] = "overflow"
    options: list[OverflowOption] = Field(min_length=2, max_length=5)


class PlainTextInputElement(_Actionable, _OptionalPlaceholder):
    """テキスト入力要素"""

    type: Literal["plain_text_input"] = "plain_text_input"
    initial_value: str | None = None
    # 未指定時はfalse（1行入力）
    multiline: bool | None = None
    min_length: Annotated[int, Field(ge=0, le=3000)] | None = None
    max_length: Annotated[int, Field(ge=1)] | None = None

    @model_validator(mode="after")
    def _check_length_range(self) -> "PlainTextInputElement":
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            raise cross_field_error(
                "min_length ({min_length}) must not exceed max_length ({max_length})",
                {"min_length": self.min_length, "max_length": self.max_length},
            )
        return self


class RadioButtonsElement(_Confirmable):
    """radio buttons要素"""

    type: Literal["radio_buttons"] = "radio_buttons"
    options: list[RadioButtonOption] = Field(min_length=1)
    initial_option: RadioButtonOption | None = None

    @model_validator(mode="after")
    def _check_initial_option(self) -> "RadioButtonsElement":
        if self.initial_option is not None:
            _ensure_initial_options_match(self.options, [self.initial_option], "initial_option")
        return self


class CheckboxesElement(_Confirmable):
    """checkboxes要素"""

    type: Literal["checkboxes"] = "checkboxes"
    options: list[MixedTextOption] = Field(min_length=1)
    initial_options: list[MixedTextOption] | None = None

    @model_validator(mode="after")
    def _check_initial_options(self) -> "CheckboxesElement":
        if self.initial_options is not None:
            _ensure_initial_options_match(self.options, self.initial_options, "initial_options")
        return self


class DatepickerElement(_Confirmable, _OptionalPlaceholder):
    """日付選択要素"""

    type: Literal["datepicker"] = "datepicker"
    # YYYY-MM-DD形式
    initial_date: str | None = None

    @field_validator("initial_date")
    @classmethod
    def _check_initial_date(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            parsed = date.fromisoformat(value)
        except ValueError as e:
            msg = f"initial_date must be a valid date in YYYY-MM-DD format: {value!r}"
            raise ValueError(msg) from e
        if parsed.isoformat() != value:
            msg = f"initial_date must be a valid date in YYYY-MM-DD format: {value!r}"
            raise ValueError(msg)
        return value


# --- single select ---


class StaticSelectElement(_SelectMenu):
    """static_select（optionsを持つ形）"""

    type: Literal["static_select"] = "static_select"
    options: list[PlainTextOption] = Field(min_length=1, max_length=100)
    initial_option: PlainTextOption | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "static_select")

    @model_validator(mode="after")
    def _check_initial_option(self) -> "StaticSelectElement":
        if self.initial_option is not None:
            _ensure_initial_options_match(self.options, [self.initial_option], "initial_option")
        return self


class GroupedStaticSelectElement(_SelectMenu):
    """static_select（option_groupsを持つ形）"""

    type: Literal["static_select"] = "static_select"
    option_groups: list[PlainTextOptionGroup] = Field(min_length=1, max_length=100)
    initial_option: PlainTextOption | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "static_select")

    @model_validator(mode="after")
    def _check_initial_option(self) -> "GroupedStaticSelectElement":
        if self.initial_option is not None:
            options = [option for group in self.option_groups for option in group.options]
            _ensure_initial_options_match(options, [self.initial_option], "initial_option")
        return self


class ExternalSelectElement(_SelectMenu):
    """external_select要素"""

    type: Literal["external_select"] = "external_select"
    initial_option: PlainTextOption | None = None
    # 未指定時は3
    min_query_length: Annotated[int, Field(ge=0)] | None = None


class UsersSelectElement(_SelectMenu):
    """users_select要素"""

    type: Literal["users_select"] = "users_select"
    initial_user: str | None = None


class ConversationsSelectElement(_SelectMenu):
    """conversations_select要素"""

    type: Literal["conversations_select"] = "conversations_select"
    initial_conversation: str | None = None
    # 未指定時はfalse。trueならinitial_conversationは無視される
    default_to_current_conversation: bool | None = None
    # モーダルのinputブロック内でのみ有効
    response_url_enabled: bool | None = None
    filter: FilterObject | None = None


class ChannelsSelectElement(_SelectMenu):
    """channels_select要素"""

    type: Literal["channels_select"] = "channels_select"
    initial_channel: str | None = None
    # モーダルのinputブロック内でのみ有効
    response_url_enabled: bool | None = None


# --- multi select ---


class MultiStaticSelectElement(_MultiSelectMenu):
    """multi_static_select（optionsを持つ形）"""

    type: Literal["multi_static_select"] = "multi_static_select"
    options: list[PlainTextOption] = Field(min_length=1, max_length=100)
    initial_options: list[PlainTextOption] | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "multi_static_select")

    @model_validator(mode="after")
    def _check_initial_options(self) -> "MultiStaticSelectElement":
        if self.initial_options is not None:
            _ensure_initial_options_match(self.options, self.initial_options, "initial_options")
        return self


class GroupedMultiStaticSelectElement(_MultiSelectMenu):
    """multi_static_select（option_groupsを持つ形）"""

    type: Literal["multi_static_select"] = "multi_static_select"
    option_groups: list[PlainTextOptionGroup] = Field(min_length=1, max_length=100)
    initial_options: list[PlainTextOption] | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "multi_static_select")

    @model_validator(mode="after")
    def _check_initial_options(self) -> "GroupedMultiStaticSelectElement":
        if self.initial_options is not None:
            options = [option for group in self.option_groups for option in group.options]
            _ensure_initial_options_match(options, self.initial_options, "initial_options")
        return self


class MultiExternalSelectElement(_MultiSelectMenu):
    """multi_external_select要素"""

    type: Literal["multi_external_select"] = "multi_external_select"
    # 未指定時は3
    min_query_length: Annotated[int, Field(ge=0)] | None = None
    initial_options: list[PlainTextOption] | None = None


class MultiUsersSelectElement(_MultiSelectMenu):
    """multi_users_select要素"""

    type: Literal["multi_users_select"] = "multi_users_select"
    initial_users: list[str] | None = None


class MultiConversationsSelectElement(_MultiSelectMenu):
    """multi_conversations_select要素"""

    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    initial_conversations: list[str] | None = None
    # 未指定時はfalse。trueならinitial_conversationsは無視される
    default_to_current_conversation: bool | None = None
    filter: FilterObject | None = None


class MultiChannelsSelectElement(_MultiSelectMenu):
    """multi_channels_select要素"""

    type: Literal["multi_channels_select"] = "multi_channels_select"
    initial_channels: list[str] | None = None


MULTI_SELECT_ELEMENTS = (
    MultiStaticSelectElement,
    GroupedMultiStaticSelectElement,
    MultiExternalSelectElement,
    MultiUsersSelectElement,
    MultiConversationsSelectElement,
    MultiChannelsSelectElement,
)

_GROUPED_TYPES = frozenset({"static_select", "multi_static_select"})


def element_tag(value: Any) -> str | None:
    """要素のunionを解決するタグを返す

    static系セレクトはoption_groupsを持つ場合に別のタグになる。
    """
    element_type = get_field(value, "type")
    if element_type in _GROUPED_TYPES and get_field(value, "option_groups") is not None:
        return f"{element_type}:grouped"
    return element_type


_SelectVariants = Union[
    Annotated[StaticSelectElement, Tag("static_select")],
    Annotated[GroupedStaticSelectElement, Tag("static_select:grouped")],
    Annotated[ExternalSelectElement, Tag("external_select")],
    Annotated[UsersSelectElement, Tag("users_select")],
    Annotated[ConversationsSelectElement, Tag("conversations_select")],
    Annotated[ChannelsSelectElement, Tag("channels_select")],
]

_MultiSelectVariants = Union[
    Annotated[MultiStaticSelectElement, Tag("multi_static_select")],
    Annotated[GroupedMultiStaticSelectElement, Tag("multi_static_select:grouped")],
    Annotated[MultiExternalSelectElement, Tag("multi_external_select")],
    Annotated[MultiUsersSelectElement, Tag("multi_users_select")],
    Annotated[MultiConversationsSelectElement, Tag("multi_conversations_select")],
    Annotated[MultiChannelsSelectElement, Tag("multi_channels_select")],
]

SelectElement = Annotated[_SelectVariants, Discriminator(element_tag)]
MultiSelectElement = Annotated[_MultiSelectVariants, Discriminator(element_tag)]

# 任意の要素（sectionのaccessoryなど）
Element = Annotated[
    Union[
        Annotated[ButtonElement, Tag("button")],
        Annotated[CheckboxesElement, Tag("checkboxes")],
        Annotated[DatepickerElement, Tag("datepicker")],
        Annotated[ImageElement, Tag("image")],
        Annotated[OverflowElement, Tag("overflow")],
        Annotated[PlainTextInputElement, Tag("plain_text_input")],
        Annotated[RadioButtonsElement, Tag("radio_buttons")],
        _SelectVariants,
        _MultiSelectVariants,
    ],
    Discriminator(element_tag),
]

# actionsブロックに置ける要素
ActionElement = Annotated[
    Union[
        Annotated[ButtonElement, Tag("button")],
        Annotated[OverflowElement, Tag("overflow")],
        Annotated[DatepickerElement, Tag("datepicker")],
        _SelectVariants,
        _MultiSelectVariants,
    ],
    Discriminator(element_tag),
]

# inputブロックに置ける要素
InputElement = Annotated[
    Union[
        Annotated[PlainTextInputElement, Tag("plain_text_input")],
        Annotated[DatepickerElement, Tag("datepicker")],
        _SelectVariants,
        _MultiSelectVariants,
    ],
    Discriminator(element_tag),
]


class OptionsResponse(BlockKitModel):
    """外部データソースへの選択肢レスポンス（optionsを返す形）"""

    options: list[PlainTextOption] = Field(max_length=100)

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "external select response")


class OptionGroupsResponse(BlockKitModel):
    """外部データソースへの選択肢レスポンス（option_groupsを返す形）"""

    option_groups: list[PlainTextOptionGroup] = Field(max_length=100)

    @model_validator(mode="before")
    @classmethod
    def _check_option_source(cls, data: Any) -> Any:
        return check_exactly_one(data, "options", "option_groups", "external select response")


ExternalSelectResponse = Annotated[
    Union[
        Annotated[OptionsResponse, Tag("options")],
        Annotated[OptionGroupsResponse, Tag("option_groups")],
    ],
    Discriminator(tag_by_presence("option_groups", "option_groups", "options")),
]
