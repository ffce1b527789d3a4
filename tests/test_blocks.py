"""レイアウトブロックのテスト"""

import logging

import pytest
from pydantic import TypeAdapter, ValidationError

from slack_block_kit.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    DividerBlock,
    FieldsSectionBlock,
    FileBlock,
    ImageBlock,
    InputBlock,
    TextSectionBlock,
)
from slack_block_kit.elements import (
    ButtonElement,
    DatepickerElement,
    ImageElement,
    MultiUsersSelectElement,
    PlainTextInputElement,
)
from slack_block_kit.objects import MarkdownText, PlainText
from slack_block_kit.payload import to_payload

block_adapter: TypeAdapter = TypeAdapter(Block)


def _button(action_id: str) -> ButtonElement:
    return ButtonElement(action_id=action_id, text=PlainText(text=action_id))


class TestSectionBlock:
    """sectionブロックのテスト"""

    def test_text_only(self) -> None:
        """textのみのsectionが生成できること"""
        block = TextSectionBlock(text=MarkdownText(text="*Hello*"))
        assert to_payload(block) == {"type": "section", "text": {"type": "mrkdwn", "text": "*Hello*"}}

    def test_fields_only(self) -> None:
        """fieldsのみのsectionが生成できること"""
        block = FieldsSectionBlock(fields=[MarkdownText(text="*Priority*"), PlainText(text="High")])
        payload = to_payload(block)
        assert "text" not in payload
        assert len(payload["fields"]) == 2

    def test_text_and_fields(self) -> None:
        """textとfieldsの両方を持つsectionが生成できること"""
        block = TextSectionBlock(text=PlainText(text="Summary"), fields=[PlainText(text="A")])
        assert block.fields is not None

    def test_text_section_requires_text(self) -> None:
        """text版のsectionはtextが無いとエラーになること"""
        with pytest.raises(ValidationError):
            TextSectionBlock(fields=[PlainText(text="A")])  # type: ignore[call-arg]

    def test_neither_text_nor_fields_fails(self) -> None:
        """textもfieldsも無いsectionはエラーになること"""
        with pytest.raises(ValidationError) as exc_info:
            FieldsSectionBlock()  # type: ignore[call-arg]
        assert exc_info.value.errors()[0]["type"] == "missing_one_of"

    def test_parsed_section_without_content_fails(self) -> None:
        """dictから検証した場合もtextもfieldsも無いとエラーになること"""
        with pytest.raises(ValidationError) as exc_info:
            block_adapter.validate_python({"type": "section"})
        assert exc_info.value.errors()[0]["type"] == "missing_one_of"

    def test_parsed_fields_only_section(self) -> None:
        """fieldsのみのdictはfields版のクラスになること"""
        block = block_adapter.validate_python({"type": "section", "fields": [{"type": "plain_text", "text": "A"}]})
        assert isinstance(block, FieldsSectionBlock)

    def test_parsed_text_section(self) -> None:
        """textを持つdictはtext版のクラスになること"""
        block = block_adapter.validate_python(
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "Hello"},
                "fields": [{"type": "plain_text", "text": "A"}],
            }
        )
        assert isinstance(block, TextSectionBlock)

    def test_too_many_fields(self) -> None:
        """fieldsが10個を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            FieldsSectionBlock(fields=[PlainText(text=str(i)) for i in range(11)])

    def test_text_too_long(self) -> None:
        """textが3000文字を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            TextSectionBlock(text=MarkdownText(text="x" * 3001))

    def test_field_text_too_long(self) -> None:
        """fieldsの各テキストが2000文字を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            FieldsSectionBlock(fields=[PlainText(text="x" * 2001)])

    def test_accessory(self) -> None:
        """accessoryに要素を置けること"""
        block = TextSectionBlock(text=PlainText(text="Deploy?"), accessory=_button("deploy"), block_id="deploy-section")
        payload = to_payload(block)
        assert payload["block_id"] == "deploy-section"
        assert payload["accessory"]["type"] == "button"
        assert payload["accessory"]["action_id"] == "deploy"


class TestActionsBlock:
    """actionsブロックのテスト"""

    def test_five_elements_succeeds(self) -> None:
        """要素が5個なら生成できること"""
        block = ActionsBlock(elements=[_button(f"b{i}") for i in range(5)])
        assert len(block.elements) == 5

    def test_six_elements_fails(self) -> None:
        """要素が6個だとエラーになること"""
        with pytest.raises(ValidationError) as exc_info:
            ActionsBlock(elements=[_button(f"b{i}") for i in range(6)])
        assert exc_info.value.errors()[0]["type"] == "too_long"

    def test_empty_elements_fails(self) -> None:
        """要素が空だとエラーになること"""
        with pytest.raises(ValidationError):
            ActionsBlock(elements=[])

    def test_rejects_plain_text_input(self) -> None:
        """actionsブロックにテキスト入力要素は置けないこと"""
        with pytest.raises(ValidationError):
            block_adapter.validate_python(
                {"type": "actions", "elements": [{"type": "plain_text_input", "action_id": "comment"}]}
            )

    def test_multi_select_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """multi select要素は警告ログ付きで受け入れられること"""
        element = MultiUsersSelectElement(action_id="users", placeholder=PlainText(text="Choose"))
        with caplog.at_level(logging.WARNING, logger="slack_block_kit.blocks"):
            block = ActionsBlock(elements=[element])

        assert block.elements[0] == element
        assert "multi_users_select" in caplog.text

    def test_multi_select_rejected_in_strict_mode(self) -> None:
        """strictモードではmulti select要素がエラーになること"""
        data = {
            "type": "actions",
            "elements": [
                {
                    "type": "multi_users_select",
                    "action_id": "users",
                    "placeholder": {"type": "plain_text", "text": "Choose"},
                }
            ],
        }
        with pytest.raises(ValidationError) as exc_info:
            block_adapter.validate_python(data, context={"strict_actions_elements": True})
        assert exc_info.value.errors()[0]["type"] == "unsupported_element"

    def test_datepicker_payload(self) -> None:
        """datepickerを含むactionsブロックのペイロード"""
        block = ActionsBlock(elements=[DatepickerElement(action_id="due", initial_date="2024-01-15")])
        assert to_payload(block) == {
            "type": "actions",
            "elements": [{"type": "datepicker", "action_id": "due", "initial_date": "2024-01-15"}],
        }


class TestContextBlock:
    """contextブロックのテスト"""

    def test_mixed_elements(self) -> None:
        """画像とテキストを混在できること"""
        block = ContextBlock(
            elements=[
                ImageElement(image_url="https://example.com/icon.png", alt_text="icon"),
                MarkdownText(text="Posted by *bot*"),
            ]
        )
        assert [e["type"] for e in to_payload(block)["elements"]] == ["image", "mrkdwn"]

    def test_too_many_elements(self) -> None:
        """要素が10個を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            ContextBlock(elements=[PlainText(text=str(i)) for i in range(11)])

    def test_rejects_button(self) -> None:
        """contextブロックにボタンは置けないこと"""
        with pytest.raises(ValidationError):
            block_adapter.validate_python(
                {
                    "type": "context",
                    "elements": [
                        {"type": "button", "action_id": "b", "text": {"type": "plain_text", "text": "b"}}
                    ],
                }
            )


class TestOtherBlocks:
    """その他のブロックのテスト"""

    def test_input_block(self) -> None:
        """inputブロックが生成できること"""
        block = InputBlock(
            label=PlainText(text="Comment"),
            element=PlainTextInputElement(action_id="comment"),
            optional=False,
        )
        assert to_payload(block) == {
            "type": "input",
            "label": {"type": "plain_text", "text": "Comment"},
            "element": {"type": "plain_text_input", "action_id": "comment"},
            "optional": False,
        }

    def test_input_block_rejects_button(self) -> None:
        """inputブロックにボタンは置けないこと"""
        with pytest.raises(ValidationError):
            block_adapter.validate_python(
                {
                    "type": "input",
                    "label": {"type": "plain_text", "text": "Label"},
                    "element": {"type": "button", "action_id": "b", "text": {"type": "plain_text", "text": "b"}},
                }
            )

    def test_image_block_alt_text_too_long(self) -> None:
        """alt_textが2000文字を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            ImageBlock(image_url="https://example.com/a.png", alt_text="x" * 2001)

    def test_file_block_source(self) -> None:
        """fileブロックのsourceが常にremoteで出力されること"""
        assert to_payload(FileBlock(external_id="ABCD1")) == {
            "type": "file",
            "external_id": "ABCD1",
            "source": "remote",
        }

    def test_divider_rejects_text(self) -> None:
        """dividerブロックにtextを指定するとエラーになること"""
        with pytest.raises(ValidationError):
            block_adapter.validate_python({"type": "divider", "text": {"type": "plain_text", "text": "x"}})

    def test_block_id_too_long(self) -> None:
        """block_idが255文字を超えるとエラーになること"""
        with pytest.raises(ValidationError):
            DividerBlock(block_id="b" * 256)

    def test_unknown_block_type(self) -> None:
        """未知のtypeはエラーになること"""
        with pytest.raises(ValidationError) as exc_info:
            block_adapter.validate_python({"type": "header"})
        assert exc_info.value.errors()[0]["type"] == "union_tag_invalid"
