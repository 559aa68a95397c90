"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Any

from ..errors import ValidationError

_CENT = Decimal("0.01")
_HALF = Decimal("0.5")


def _to_decimal(amount: Any) -> Decimal:
    """数値または数値文字列を Decimal に変換する."""
    if isinstance(amount, bool):
        raise ValidationError("Invalid money amount: must be a valid number", value=amount)
    if isinstance(amount, Decimal):
        number = amount
    elif isinstance(amount, int):
        number = Decimal(amount)
    elif isinstance(amount, (float, str)):
        # float は最短の10進表現を経由して2進数誤差を持ち込まない
        try:
            number = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValidationError(
                "Invalid money amount: must be a valid number", value=amount
            ) from None
    else:
        raise ValidationError("Invalid money amount: must be a valid number", value=amount)

    if not number.is_finite():
        raise ValidationError("Invalid money amount: must be a valid number", value=amount)
    return number


def _round_to_cents(number: Decimal) -> Decimal:
    """セント単位に丸める（端数 0.5 は切り上げ）."""
    cents = (number * 100 + _HALF).to_integral_value(rounding=ROUND_FLOOR)
    return (cents / 100).quantize(_CENT)


@dataclass(frozen=True)
class Money:
    """小数点以下2桁の金額を表現する値オブジェクト.

    値は常にセント単位に丸められ（0.5 は正の無限大方向へ、-0.125 は -0.12）、
    演算結果も都度丸め直される。インスタンスは不変。
    """

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーションと正規化."""
        normalized = _round_to_cents(_to_decimal(self.value))
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, amount: int | float | str | Decimal) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(amount)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(0)

    @classmethod
    def from_decimal(cls, source: Any) -> Money:
        """外部の数値表現から生成する.

        None はゼロ、数値変換メソッドを持つオブジェクトはその値として扱う。
        """
        if source is None:
            return cls.zero()
        if isinstance(source, (bool, int, float, str, Decimal)):
            return cls(source)
        to_number = getattr(source, "to_number", None)
        if callable(to_number):
            return cls(to_number())
        if hasattr(source, "__float__"):
            return cls(float(source))
        return cls(source)

    def is_positive(self) -> bool:
        """正の金額か判定."""
        return self.value > 0

    def is_negative(self) -> bool:
        """負の金額か判定."""
        return self.value < 0

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def subtract(self, other: Money) -> Money:
        """金額を減算して新しいMoneyを返す."""
        return Money(self.value - other.value)

    def multiply(self, factor: int | float | Decimal) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValidationError("Cannot multiply money by negative factor", value=factor)
        return Money(self.value * _to_decimal(factor))

    def divide(self, divisor: int | float | Decimal) -> Money:
        """金額を除算して新しいMoneyを返す."""
        if divisor == 0:
            raise ValidationError("Cannot divide money by zero", value=divisor)
        return Money(self.value / _to_decimal(divisor))

    def absolute(self) -> Money:
        """絶対値を返す."""
        return Money(abs(self.value))

    def negate(self) -> Money:
        """符号を反転した金額を返す."""
        return Money(-self.value)

    def equals(self, other: Money) -> bool:
        """他の金額と等しいか判定."""
        return self.value == other.value

    def greater_than(self, other: Money) -> bool:
        """この金額が他の金額より大きいか判定."""
        return self.value > other.value

    def less_than(self, other: Money) -> bool:
        """この金額が他の金額より小さいか判定."""
        return self.value < other.value

    def greater_than_or_equal(self, other: Money) -> bool:
        """この金額が他の金額以上か判定."""
        return self.value >= other.value

    def less_than_or_equal(self, other: Money) -> bool:
        """この金額が他の金額以下か判定."""
        return self.value <= other.value

    def to_string(self) -> str:
        """小数点以下2桁の文字列（例: "100.50"）."""
        return f"{self.value:.2f}"

    def to_float(self) -> float:
        """JSON出力用の数値."""
        return float(self.value)

    def __str__(self) -> str:
        """文字列表現."""
        return self.to_string()
