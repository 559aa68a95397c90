"""支払方法の列挙型."""
from enum import Enum


class PaymentMethod(Enum):
    """支出の支払方法."""

    CASH = "CASH"
    TRANSFER = "TRANSFER"
    CARD = "CARD"
    OTHER = "OTHER"

    def get_display_name(self) -> str:
        """日本語表示名を返す."""
        names = {
            PaymentMethod.CASH: "現金",
            PaymentMethod.TRANSFER: "振込",
            PaymentMethod.CARD: "カード",
            PaymentMethod.OTHER: "その他",
        }
        return names[self]
