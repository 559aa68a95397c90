"""入力値バリデーションのドメインサービス."""
from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Iterable

from ..errors import ValidationError
from ..value_objects.period import MAX_YEAR, MIN_YEAR, PERIOD_PATTERN

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

# 1セント未満の端数とみなさない誤差（float の表現誤差を吸収する）
_CENT_TOLERANCE = Decimal("0.000001")


def _is_number(value: Any) -> bool:
    """有限の数値か判定する（bool は数値とみなさない）."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def _as_date(value: Any) -> date | None:
    """日付として解釈できれば date を返す."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    return None


class ValidationService:
    """ユースケースの入力を検証するルール群.

    各ルールは違反時に ValidationError を送出し、問題なければ何も返さない。
    """

    @staticmethod
    def validate_non_empty_string(value: Any, field_name: str) -> None:
        """空文字・空白のみの文字列でないことを検証する."""
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{field_name} cannot be empty", field_name, value)

    @staticmethod
    def validate_min_length(value: Any, min_length: int, field_name: str) -> None:
        """前後の空白を除いた長さが最小長以上であることを検証する."""
        if not isinstance(value, str) or len(value.strip()) < min_length:
            raise ValidationError(
                f"{field_name} must be at least {min_length} characters long",
                field_name,
                value,
            )

    @staticmethod
    def validate_max_length(value: Any, max_length: int, field_name: str) -> None:
        """長さが最大長以下であることを検証する."""
        if isinstance(value, str) and len(value) > max_length:
            raise ValidationError(
                f"{field_name} cannot exceed {max_length} characters",
                field_name,
                value,
            )

    @staticmethod
    def validate_positive_number(value: Any, field_name: str) -> None:
        """正の数（> 0）であることを検証する."""
        if not _is_number(value) or value <= 0:
            raise ValidationError(f"{field_name} must be a positive number", field_name, value)

    @staticmethod
    def validate_non_negative_number(value: Any, field_name: str) -> None:
        """0以上の数であることを検証する."""
        if not _is_number(value) or value < 0:
            raise ValidationError(f"{field_name} cannot be negative", field_name, value)

    @staticmethod
    def validate_two_decimals(value: Any, field_name: str) -> None:
        """小数点以下が2桁以内であることを検証する.

        セント単位に換算した値が整数から許容誤差以上ずれていれば違反とする。
        """
        try:
            cents = Decimal(str(value)) * 100
            has_fraction = abs(cents - cents.to_integral_value()) > _CENT_TOLERANCE
        except (InvalidOperation, ValueError):
            has_fraction = True
        if has_fraction:
            raise ValidationError(
                f"{field_name} cannot have more than 2 decimal places",
                field_name,
                value,
            )

    @staticmethod
    def validate_period_format(period: Any, field_name: str = "period") -> None:
        """YYYY-MM 形式で月が01-12、年が1900-2100であることを検証する."""
        if not isinstance(period, str) or not PERIOD_PATTERN.fullmatch(period):
            raise ValidationError(
                f'{field_name} must be in YYYY-MM format (e.g., "2025-01")',
                field_name,
                period,
            )

        year, month = (int(part) for part in period.split("-"))
        if month < 1 or month > 12:
            raise ValidationError(
                f"{field_name} month must be between 01 and 12",
                field_name,
                period,
            )
        if year < MIN_YEAR or year > MAX_YEAR:
            raise ValidationError(
                f"{field_name} year must be between {MIN_YEAR} and {MAX_YEAR}",
                field_name,
                period,
            )

    @staticmethod
    def validate_date(value: Any, field_name: str) -> None:
        """日付であることを検証する.

        date/datetime に加えて、API から届く ISO 8601 形式の日付文字列（例: "2025-01-31"）も
        受け付ける。存在しない日付（"2025-02-30" など）の文字列は不正とする。
        """
        if _as_date(value) is None:
            raise ValidationError(f"{field_name} must be a valid date", field_name, value)

    @staticmethod
    def validate_not_future_date(
        value: Any, field_name: str, today: date | None = None
    ) -> None:
        """未来の日付でないことを検証する."""
        ValidationService.validate_date(value, field_name)
        is_future = _as_date(value) > (today or date.today())
        if is_future:
            raise ValidationError(f"{field_name} cannot be in the future", field_name, value)

    @staticmethod
    def to_date(value: Any, field_name: str) -> date:
        """日付を検証して date に変換する."""
        ValidationService.validate_date(value, field_name)
        return _as_date(value)

    @staticmethod
    def validate_uuid(value: Any, field_name: str = "id") -> None:
        """UUID形式であることを検証する."""
        if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
            raise ValidationError(f"{field_name} must be a valid UUID", field_name, value)

    @staticmethod
    def validate_enum(value: Any, valid_values: Iterable[Any], field_name: str) -> None:
        """許可された値のいずれかであることを検証する.

        Enum のメンバーを渡した場合はメンバー自身とその value の両方を許可する。
        """
        allowed = list(valid_values)
        candidates = set()
        for option in allowed:
            candidates.add(option)
            if isinstance(option, Enum):
                candidates.add(option.value)
        try:
            is_valid = value in candidates
        except TypeError:
            is_valid = False
        if not is_valid:
            labels = ", ".join(
                str(o.value) if isinstance(o, Enum) else str(o) for o in allowed
            )
            raise ValidationError(f"{field_name} must be one of: {labels}", field_name, value)

    @staticmethod
    def validate_different(value1: Any, value2: Any, message: str) -> None:
        """2つの値が異なることを検証する."""
        if value1 == value2:
            raise ValidationError(message)

    @staticmethod
    def validate_expense_amount(amount: Any, field_name: str = "amount") -> None:
        """支出金額を検証する.

        入力は正負どちらでもよい（借方への符号変換は呼び出し側の責務）。
        """
        magnitude = abs(amount) if _is_number(amount) else amount
        ValidationService.validate_positive_number(magnitude, field_name)
        ValidationService.validate_two_decimals(magnitude, field_name)

    @staticmethod
    def validate_monthly_budget(amount: Any, field_name: str = "monthly_budget") -> None:
        """月次予算が正の数で小数点以下2桁以内であることを検証する."""
        ValidationService.validate_positive_number(amount, field_name)
        ValidationService.validate_two_decimals(amount, field_name)

    @staticmethod
    def validate_provision_amount(amount: Any, field_name: str = "amount") -> None:
        """引当金額を検証する（支出金額と同じ規則）."""
        ValidationService.validate_expense_amount(amount, field_name)

    @staticmethod
    def collect_errors(validations: Iterable[Callable[[], Any]]) -> list[ValidationError]:
        """複数の検証を実行し、発生した ValidationError を順に集める.

        ValidationError 以外の例外はそのまま伝播する。
        """
        errors: list[ValidationError] = []
        for validation in validations:
            try:
                validation()
            except ValidationError as e:
                errors.append(e)
        return errors

    @staticmethod
    def raise_if_errors(errors: list[ValidationError]) -> None:
        """エラーがあればまとめて1つの ValidationError として送出する."""
        if not errors:
            return
        message = "\n".join(f"{e.field or 'Field'}: {e.message}" for e in errors)
        raise ValidationError(f"Validation failed:\n{message}", errors=list(errors))
