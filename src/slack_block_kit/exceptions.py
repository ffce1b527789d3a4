"""slack_block_kitの例外"""

from dataclasses import dataclass
from typing import Any, Literal

ViolationKind = Literal["shape", "exclusivity", "bound", "cross_field"]

_EXCLUSIVITY_TYPES = frozenset({"mutually_exclusive", "missing_one_of"})
_BOUND_TYPES = frozenset(
    {
        "text_too_long",
        "too_long",
        "too_short",
        "string_too_long",
        "string_too_short",
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
    }
)
_CROSS_FIELD_TYPES = frozenset({"cross_field"})


class BlockKitError(Exception):
    """slack_block_kitのエラーの基底クラス"""


class SlackAPIError(BlockKitError):
    """Slack APIでエラーが発生した場合のエラー"""

    def __init__(self, message: str, error_code: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            error_code: Slack APIから返されたエラーコード
        """
        super().__init__(message)
        self.error_code = error_code


@dataclass(frozen=True)
class Violation:
    """ペイロード検証で見つかった違反1件"""

    kind: ViolationKind
    location: str  # 例: "blocks.0.elements"
    message: str
    input: Any


def _is_resolvable(value: Any, part: str | int) -> bool:
    if isinstance(value, dict):
        return part in value
    if isinstance(value, list):
        return isinstance(part, int) and 0 <= part < len(value)
    return False


def payload_location(loc: tuple[str | int, ...], payload: Any, error_type: str = "") -> str:
    """pydanticのエラー位置から判別共用体のタグを除き、入力ペイロード上のパスに変換する

    例: ("blocks", "blocks", 0, "actions", "elements") -> "blocks.0.elements"
    """
    parts: list[str | int] = []
    current = payload
    for index, part in enumerate(loc):
        is_last = index == len(loc) - 1
        if _is_resolvable(current, part):
            child = current[part]
            # タグとフィールド名が同じ場合は、次の要素が現在の階層で解決できるかで区別する
            if not is_last and _is_resolvable(current, loc[index + 1]) and not _is_resolvable(child, loc[index + 1]):
                continue
            parts.append(part)
            current = child
        elif is_last and error_type == "missing":
            parts.append(part)
        # それ以外は判別共用体のタグ
    return ".".join(str(part) for part in parts)


def classify_error_type(error_type: str) -> ViolationKind:
    """pydanticのエラー種別を違反の分類に変換する"""
    if error_type in _EXCLUSIVITY_TYPES:
        return "exclusivity"
    if error_type in _BOUND_TYPES:
        return "bound"
    if error_type in _CROSS_FIELD_TYPES:
        return "cross_field"
    return "shape"


class PayloadValidationError(BlockKitError):
    """ペイロードがBlock Kitのスキーマを満たさない場合のエラー"""

    def __init__(self, entity: str, errors: list[dict[str, Any]], payload: Any = None) -> None:
        """初期化

        Args:
            entity: 検証対象のペイロード種別（"message", "view"など）
            errors: pydantic.ValidationError.errors()の結果
            payload: 検証した入力。指定するとエラー位置を入力上のパスで表す
        """
        self.entity = entity
        self.errors = errors
        self.payload = payload
        details = "; ".join(f"{v.location or '<root>'}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid {entity} payload: {details}")

    @property
    def violations(self) -> list[Violation]:
        """違反を分類したリスト"""
        return [
            Violation(
                kind=classify_error_type(error["type"]),
                location=self._location(error),
                message=error["msg"],
                input=error.get("input"),
            )
            for error in self.errors
        ]

    def _location(self, error: dict[str, Any]) -> str:
        if self.payload is None:
            return ".".join(str(part) for part in error["loc"])
        return payload_location(tuple(error["loc"]), self.payload, error["type"])

    @property
    def kinds(self) -> set[ViolationKind]:
        """含まれる違反の分類"""
        return {violation.kind for violation in self.violations}
