"""モーダルとホームタブのビュー"""

from typing import Annotated, Literal

from pydantic import Field, model_validator

from slack_block_kit.base import BlockKitModel, cross_field_error, text_max_length
from slack_block_kit.blocks import Block, InputBlock, check_unique_block_ids
from slack_block_kit.objects import TaggedPlainText

ViewTitle = Annotated[TaggedPlainText, text_max_length(24)]


class _View(BlockKitModel):
    blocks: list[Block] = Field(max_length=100)
    # view_submission / block_actions で返される任意の文字列
    private_metadata: Annotated[str, Field(max_length=3000)] | None = None
    callback_id: Annotated[str, Field(max_length=255)] | None = None
    # チーム内で一意なID
    external_id: str | None = None

    @model_validator(mode="after")
    def _check_block_ids(self) -> "_View":
        check_unique_block_ids(self.blocks)
        return self


class ModalView(_View):
    """モーダルビュー

    blocksにinputブロックが含まれる場合はsubmitが必須。
    """

    type: Literal["modal"] = "modal"
    title: ViewTitle
    close: ViewTitle | None = None
    submit: ViewTitle | None = None
    # 未指定時はfalse
    clear_on_close: bool | None = None
    # 未指定時はfalse
    notify_on_close: bool | None = None

    @model_validator(mode="after")
    def _check_submit(self) -> "ModalView":
        if self.submit is None and any(isinstance(block, InputBlock) for block in self.blocks):
            raise cross_field_error("submit is required when blocks contain an input block")
        return self


class HomeView(_View):
    """ホームタブのビュー"""

    type: Literal["home"] = "home"


View = Annotated[ModalView | HomeView, Field(discriminator="type")]
