"""Moneyのテスト."""
from decimal import Decimal

import pytest

from budget_manager.domain.errors import ValidationError
from budget_manager.domain.value_objects import Money


class TestMoneyCreate:
    """Moneyの生成と丸めのテスト."""

    def test_小数点以下2桁に丸められる(self) -> None:
        assert Money.of(100.555).value == Decimal("100.56")
        assert Money.of(100.554).value == Decimal("100.55")

    def test_端数0_5は正の無限大方向に丸められる(self) -> None:
        assert Money.of("0.005").value == Decimal("0.01")
        assert Money.of("0.125").value == Decimal("0.13")
        assert Money.of("-0.125").value == Decimal("-0.12")
        assert Money.of("-0.005").value == Decimal("0.00")
        assert Money.of("-2.675").value == Decimal("-2.67")

    def test_演算結果も同じ規則で丸められる(self) -> None:
        assert Money.of("-0.25").divide(2).value == Decimal("-0.12")
        assert Money.of("0.25").divide(2).value == Decimal("0.13")

    def test_丸め誤差は半セント以内(self) -> None:
        for x in [0.1, 1.005, 2.675, 123.456, -9.999, 1e6 + 0.333]:
            money = Money.of(x)
            assert money.value == money.value.quantize(Decimal("0.01"))
            assert abs(money.value - Decimal(str(x))) <= Decimal("0.005")

    def test_floatの2進数誤差を持ち込まない(self) -> None:
        assert Money.of(0.1).add(Money.of(0.2)).value == Decimal("0.30")

    def test_数値文字列から生成できる(self) -> None:
        assert Money.of("12.3").value == Decimal("12.30")

    @pytest.mark.parametrize("invalid", ["abc", "", float("nan"), float("inf"), True, None, [1]])
    def test_数値でない値はエラー(self, invalid) -> None:
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(invalid)

    def test_zeroはゼロ(self) -> None:
        assert Money.zero().is_zero()

    def test_from_decimalはNoneをゼロとして扱う(self) -> None:
        assert Money.from_decimal(None) == Money.zero()

    def test_from_decimalはto_numberを持つオブジェクトを変換する(self) -> None:
        class _ExternalDecimal:
            def to_number(self) -> float:
                return 42.5

        assert Money.from_decimal(_ExternalDecimal()).value == Decimal("42.50")

    def test_from_decimalはDecimalをそのまま扱う(self) -> None:
        assert Money.from_decimal(Decimal("-200.00")) == Money.of(-200)


class TestMoneyArithmetic:
    """Moneyの演算のテスト."""

    def test_加算(self) -> None:
        x, y = Money.of(10.25), Money.of(5.5)
        assert x.add(y) == Money.of(x.value + y.value)
        assert x.add(y).value == Decimal("15.75")

    def test_減算で負になれる(self) -> None:
        assert Money.of(100).subtract(Money.of(150)).value == Decimal("-50.00")

    def test_乗算(self) -> None:
        assert Money.of(100).multiply(6).value == Decimal("600.00")

    def test_負の係数で乗算するとエラー(self) -> None:
        with pytest.raises(ValidationError, match="negative factor"):
            Money.of(100).multiply(-1)

    def test_除算(self) -> None:
        assert Money.of(100).divide(3).value == Decimal("33.33")

    def test_ゼロ除算はエラー(self) -> None:
        with pytest.raises(ValidationError, match="divide money by zero"):
            Money.of(100).divide(0)

    def test_絶対値と符号反転(self) -> None:
        assert Money.of(-30).absolute() == Money.of(30)
        assert Money.of(30).negate() == Money.of(-30)

    def test_演算は元のインスタンスを変更しない(self) -> None:
        original = Money.of(10)
        original.add(Money.of(5))
        assert original.value == Decimal("10.00")


class TestMoneyComparison:
    """Moneyの比較と出力のテスト."""

    def test_比較(self) -> None:
        small, large = Money.of(1), Money.of(2)
        assert large.greater_than(small)
        assert small.less_than(large)
        assert small.less_than_or_equal(Money.of(1))
        assert large.greater_than_or_equal(Money.of(2))
        assert small.equals(Money.of("1.00"))

    def test_符号の判定(self) -> None:
        assert Money.of(1).is_positive()
        assert Money.of(-1).is_negative()
        assert not Money.zero().is_positive()
        assert not Money.zero().is_negative()

    def test_文字列表現は小数点以下2桁(self) -> None:
        assert Money.of(100.5).to_string() == "100.50"
        assert str(Money.of(-3)) == "-3.00"

    def test_to_floatはJSON用の数値(self) -> None:
        assert Money.of(12.34).to_float() == 12.34

    def test_不変である(self) -> None:
        money = Money.of(1)
        with pytest.raises(AttributeError):
            money.value = Decimal("2")  # type: ignore[misc]
