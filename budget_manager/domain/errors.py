"""ドメインのエラー定義."""
from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """入力値の検証エラー.

    不正な入力や不変条件の違反を表す。HTTP層では 400 系に変換される。
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        errors: list[ValidationError] | None = None,
    ) -> None:
        """初期化."""
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.errors = errors or []

    def to_dict(self) -> dict:
        """API応答用の辞書に変換する."""
        if self.errors:
            return {
                "message": self.message,
                "details": [e.to_dict() for e in self.errors],
            }
        result: dict = {"message": self.message}
        if self.field is not None:
            result["field"] = self.field
        return result
