"""Block Kitモデル共通の基底クラスと制約ヘルパー"""

from collections.abc import Callable
from typing import Annotated, Any, Protocol

from pydantic import AfterValidator, BaseModel, Field
from pydantic_core import PydanticCustomError

# action_id / block_id は最大255文字
ActionId = Annotated[str, Field(min_length=1, max_length=255)]
BlockId = Annotated[str, Field(min_length=1, max_length=255)]


class BlockKitModel(BaseModel, frozen=True, extra="forbid"):
    """Block Kitのペイロードを表すモデルの基底クラス

    未知のフィールドは拒否する（別のtypeのフィールドを混ぜた場合もエラーになる）。
    """


class HasText(Protocol):
    text: str


def get_field(value: Any, name: str) -> Any:
    """dictまたはモデルインスタンスからフィールド値を取り出す"""
    if isinstance(value, dict):
        return value.get(name)
    return getattr(value, name, None)


def check_text_length(value: HasText, max_length: int) -> HasText:
    """テキストオブジェクトの本文長を検証する

    Raises:
        PydanticCustomError: 本文がmax_length文字を超える場合
    """
    if len(value.text) > max_length:
        raise PydanticCustomError(
            "text_too_long",
            "Text object must be at most {max_length} characters, got {actual_length}",
            {"max_length": max_length, "actual_length": len(value.text)},
        )
    return value


def text_max_length(max_length: int) -> AfterValidator:
    """テキストオブジェクト型に付ける文字数上限のAnnotatedメタデータ"""

    def validate(value: HasText) -> HasText:
        return check_text_length(value, max_length)

    return AfterValidator(validate)


def check_exactly_one(data: Any, first: str, second: str, entity: str) -> Any:
    """firstとsecondのどちらか一方だけが指定されていることを検証する

    model_validator(mode="before")から呼ばれる想定。
    """
    if not isinstance(data, dict):
        return data

    has_first = data.get(first) is not None
    has_second = data.get(second) is not None
    if has_first and has_second:
        raise PydanticCustomError(
            "mutually_exclusive",
            "{entity} accepts either {first} or {second}, not both",
            {"entity": entity, "first": first, "second": second},
        )
    if not has_first and not has_second:
        raise PydanticCustomError(
            "missing_one_of",
            "{entity} requires either {first} or {second}",
            {"entity": entity, "first": first, "second": second},
        )
    return data


def check_any_present(data: Any, names: tuple[str, ...], entity: str) -> Any:
    """namesのうち少なくとも1つが指定されていることを検証する"""
    if not isinstance(data, dict):
        return data

    if all(data.get(name) is None for name in names):
        raise PydanticCustomError(
            "missing_one_of",
            "{entity} requires at least one of {fields}",
            {"entity": entity, "fields": ", ".join(names)},
        )
    return data


def cross_field_error(message: str, context: dict[str, Any] | None = None) -> PydanticCustomError:
    """フィールド間の整合性違反を表すエラーを作る"""
    return PydanticCustomError("cross_field", message, context)


def tag_by_presence(field: str, present: str, absent: str) -> Callable[[Any], str]:
    """typeを持たないunionを、fieldの有無でタグ付けするDiscriminator関数を作る"""

    def discriminate(value: Any) -> str:
        return present if get_field(value, field) is not None else absent

    return discriminate


def require_type_tag(value: Any) -> Any:
    """dictで渡されたオブジェクトにtypeが含まれていることを検証する

    モデルのtypeはPython側で省略できるようデフォルト値を持つが、
    ペイロードとして渡されたdictではtypeの省略を許さない。
    """
    if isinstance(value, dict) and "type" not in value:
        raise PydanticCustomError("missing_type_tag", "Object is missing the required 'type' field")
    return value
