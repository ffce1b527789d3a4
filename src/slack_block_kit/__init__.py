"""Slack Block Kitのペイロードを検証付きの型で組み立てるライブラリ

Slack APIへの送信（slack_block_kit.client）と設定の読み込み（slack_block_kit.config）は
モデルとは別に明示的にimportして使う。
"""

from slack_block_kit.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    DividerBlock,
    FieldsSectionBlock,
    FileBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    TextSectionBlock,
)
from slack_block_kit.elements import (
    ActionElement,
    ButtonElement,
    ChannelsSelectElement,
    CheckboxesElement,
    ConversationsSelectElement,
    DatepickerElement,
    Element,
    ExternalSelectElement,
    ExternalSelectResponse,
    GroupedMultiStaticSelectElement,
    GroupedStaticSelectElement,
    ImageElement,
    InputElement,
    MultiChannelsSelectElement,
    MultiConversationsSelectElement,
    MultiExternalSelectElement,
    MultiSelectElement,
    MultiStaticSelectElement,
    MultiUsersSelectElement,
    OptionGroupsResponse,
    OptionsResponse,
    OverflowElement,
    PlainTextInputElement,
    RadioButtonsElement,
    SelectElement,
    StaticSelectElement,
    UsersSelectElement,
)
from slack_block_kit.exceptions import BlockKitError, PayloadValidationError, SlackAPIError, Violation
from slack_block_kit.messages import (
    Attachment,
    BlocksAttachment,
    BlocksMessage,
    FallbackAttachment,
    FieldObject,
    LegacyMessage,
    Message,
    TextAttachment,
)
from slack_block_kit.objects import (
    ConfirmObject,
    FilterObject,
    MarkdownText,
    MixedTextOption,
    OptionGroup,
    OptionObject,
    OverflowOption,
    PlainText,
    PlainTextOption,
    PlainTextOptionGroup,
    RadioButtonOption,
    TextObject,
)
from slack_block_kit.payload import (
    ValidationOptions,
    blocks_to_payload,
    parse_blocks,
    parse_external_select_response,
    parse_message,
    parse_view,
    to_payload,
)
from slack_block_kit.views import HomeView, ModalView, View

__all__ = [
    "ActionElement",
    "ActionsBlock",
    "Attachment",
    "Block",
    "BlockKitError",
    "BlocksAttachment",
    "BlocksMessage",
    "ButtonElement",
    "ChannelsSelectElement",
    "CheckboxesElement",
    "ConfirmObject",
    "ContextBlock",
    "ConversationsSelectElement",
    "DatepickerElement",
    "DividerBlock",
    "Element",
    "ExternalSelectElement",
    "ExternalSelectResponse",
    "FallbackAttachment",
    "FieldObject",
    "FieldsSectionBlock",
    "FileBlock",
    "FilterObject",
    "GroupedMultiStaticSelectElement",
    "GroupedStaticSelectElement",
    "HomeView",
    "ImageBlock",
    "ImageElement",
    "InputBlock",
    "InputElement",
    "LegacyMessage",
    "MarkdownText",
    "Message",
    "MixedTextOption",
    "ModalView",
    "MultiChannelsSelectElement",
    "MultiConversationsSelectElement",
    "MultiExternalSelectElement",
    "MultiSelectElement",
    "MultiStaticSelectElement",
    "MultiUsersSelectElement",
    "OptionGroup",
    "OptionGroupsResponse",
    "OptionObject",
    "OptionsResponse",
    "OverflowElement",
    "OverflowOption",
    "PayloadValidationError",
    "PlainText",
    "PlainTextInputElement",
    "PlainTextOption",
    "PlainTextOptionGroup",
    "RadioButtonOption",
    "RadioButtonsElement",
    "SectionBlock",
    "SelectElement",
    "SlackAPIError",
    "StaticSelectElement",
    "TextAttachment",
    "TextObject",
    "TextSectionBlock",
    "UsersSelectElement",
    "ValidationOptions",
    "View",
    "Violation",
    "blocks_to_payload",
    "parse_blocks",
    "parse_external_select_response",
    "parse_message",
    "parse_view",
    "to_payload",
]
