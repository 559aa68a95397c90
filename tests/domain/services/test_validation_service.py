"""ValidationServiceのテスト."""
from datetime import date, timedelta

import pytest

from budget_manager.domain.enums import PaymentMethod
from budget_manager.domain.errors import ValidationError
from budget_manager.domain.services import ValidationService


class TestStringRules:
    """文字列の検証ルールのテスト."""

    @pytest.mark.parametrize("value", ["", "   ", None, 123])
    def test_空文字はエラー(self, value) -> None:
        with pytest.raises(ValidationError, match="name cannot be empty") as exc_info:
            ValidationService.validate_non_empty_string(value, "name")
        assert exc_info.value.field == "name"

    def test_空でない文字列は通る(self) -> None:
        ValidationService.validate_non_empty_string("食費", "name")

    def test_最小長は前後の空白を除いて判定する(self) -> None:
        with pytest.raises(ValidationError, match="at least 3 characters long"):
            ValidationService.validate_min_length("  ab  ", 3, "name")
        ValidationService.validate_min_length(" abc ", 3, "name")

    def test_最大長を超えるとエラー(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed 5 characters"):
            ValidationService.validate_max_length("abcdef", 5, "name")
        ValidationService.validate_max_length("abcde", 5, "name")

    def test_最大長はNoneを許容する(self) -> None:
        ValidationService.validate_max_length(None, 5, "notes")


class TestNumberRules:
    """数値の検証ルールのテスト."""

    @pytest.mark.parametrize("value", [0, -1, "10", None, True, float("nan")])
    def test_正の数でなければエラー(self, value) -> None:
        with pytest.raises(ValidationError, match="must be a positive number"):
            ValidationService.validate_positive_number(value, "amount")

    def test_正の数は通る(self) -> None:
        ValidationService.validate_positive_number(0.01, "amount")

    def test_負の数はエラー(self) -> None:
        with pytest.raises(ValidationError, match="cannot be negative"):
            ValidationService.validate_non_negative_number(-0.01, "amount")
        ValidationService.validate_non_negative_number(0, "amount")

    def test_小数点以下3桁はエラー(self) -> None:
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            ValidationService.validate_two_decimals(100.555, "amount")

    @pytest.mark.parametrize("value", [100, 100.5, 100.55, 0.1 + 0.2, 19.99])
    def test_小数点以下2桁以内は通る(self, value) -> None:
        ValidationService.validate_two_decimals(value, "amount")

    def test_支出金額は符号を問わない(self) -> None:
        ValidationService.validate_expense_amount(100, "amount")
        ValidationService.validate_expense_amount(-100, "amount")
        with pytest.raises(ValidationError):
            ValidationService.validate_expense_amount(0, "amount")
        with pytest.raises(ValidationError):
            ValidationService.validate_expense_amount(-1.234, "amount")

    def test_月次予算は正でなければならない(self) -> None:
        ValidationService.validate_monthly_budget(500, "monthly_budget")
        with pytest.raises(ValidationError, match="monthly_budget must be a positive number"):
            ValidationService.validate_monthly_budget(-500, "monthly_budget")

    def test_引当金額は支出金額と同じ規則(self) -> None:
        ValidationService.validate_provision_amount(-500, "amount")
        with pytest.raises(ValidationError):
            ValidationService.validate_provision_amount(0, "amount")


class TestPeriodRule:
    """期間形式の検証ルールのテスト."""

    def test_正しい期間は通る(self) -> None:
        ValidationService.validate_period_format("2025-01")

    def test_形式違いはエラー(self) -> None:
        with pytest.raises(ValidationError, match="YYYY-MM format"):
            ValidationService.validate_period_format("2025/01")

    @pytest.mark.parametrize("value", ["2025-13", "2025-00"])
    def test_月の範囲外はエラー(self, value: str) -> None:
        with pytest.raises(ValidationError, match="month must be between 01 and 12"):
            ValidationService.validate_period_format(value)

    def test_年の範囲外はエラー(self) -> None:
        with pytest.raises(ValidationError, match="year must be between 1900 and 2100"):
            ValidationService.validate_period_format("1800-01")


class TestDateRules:
    """日付の検証ルールのテスト."""

    def test_dateとISO文字列は通る(self) -> None:
        ValidationService.validate_date(date(2025, 1, 1), "date")
        ValidationService.validate_date("2025-01-01", "date")

    @pytest.mark.parametrize("value", ["2025-02-30", "yesterday", None, 20250101])
    def test_日付でなければエラー(self, value) -> None:
        with pytest.raises(ValidationError, match="date must be a valid date"):
            ValidationService.validate_date(value, "date")

    def test_未来の日付はエラー(self) -> None:
        today = date(2025, 1, 15)
        with pytest.raises(ValidationError, match="cannot be in the future"):
            ValidationService.validate_not_future_date(today + timedelta(days=1), "date", today)
        ValidationService.validate_not_future_date(today, "date", today)

    def test_to_dateは文字列を変換する(self) -> None:
        assert ValidationService.to_date("2025-03-04", "date") == date(2025, 3, 4)


class TestOtherRules:
    """UUID・列挙型・相違の検証ルールのテスト."""

    def test_UUID形式(self) -> None:
        ValidationService.validate_uuid("7F1D2A36-3C1E-4A53-9F55-2B1F3C4D5E6F", "id")
        with pytest.raises(ValidationError, match="id must be a valid UUID"):
            ValidationService.validate_uuid("not-a-uuid", "id")

    def test_列挙型はメンバーと値の両方を許可する(self) -> None:
        ValidationService.validate_enum(PaymentMethod.CARD, PaymentMethod, "payment_method")
        ValidationService.validate_enum("CARD", PaymentMethod, "payment_method")

    def test_列挙型にない値はエラー(self) -> None:
        with pytest.raises(
            ValidationError,
            match="payment_method must be one of: CASH, TRANSFER, CARD, OTHER",
        ):
            ValidationService.validate_enum("BITCOIN", PaymentMethod, "payment_method")

    def test_リストの値で検証できる(self) -> None:
        ValidationService.validate_enum("a", ["a", "b"], "kind")
        with pytest.raises(ValidationError, match="kind must be one of: a, b"):
            ValidationService.validate_enum("c", ["a", "b"], "kind")

    def test_同じ値はエラー(self) -> None:
        with pytest.raises(ValidationError, match="must differ"):
            ValidationService.validate_different("x", "x", "Values must differ")
        ValidationService.validate_different("x", "y", "Values must differ")


class TestErrorAggregation:
    """エラー集約のテスト."""

    def test_collect_errorsは発生順に集める(self) -> None:
        errors = ValidationService.collect_errors([
            lambda: ValidationService.validate_non_empty_string("", "name"),
            lambda: ValidationService.validate_period_format("2025-01"),
            lambda: ValidationService.validate_positive_number(-1, "amount"),
        ])

        assert [e.field for e in errors] == ["name", "amount"]

    def test_collect_errorsは他の例外を伝播する(self) -> None:
        def _boom() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            ValidationService.collect_errors([_boom])

    def test_raise_if_errorsは空なら何もしない(self) -> None:
        ValidationService.raise_if_errors([])

    def test_raise_if_errorsはまとめて送出する(self) -> None:
        errors = [
            ValidationError("name cannot be empty", field="name"),
            ValidationError("something wrong"),
        ]

        with pytest.raises(ValidationError) as exc_info:
            ValidationService.raise_if_errors(errors)

        assert exc_info.value.message == (
            "Validation failed:\nname: name cannot be empty\nField: something wrong"
        )
        assert exc_info.value.errors == errors
        assert exc_info.value.to_dict()["details"][0] == {
            "message": "name cannot be empty",
            "field": "name",
        }
