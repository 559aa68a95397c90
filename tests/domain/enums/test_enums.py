"""列挙型のテスト."""
from budget_manager.domain.enums import PaymentMethod, ProvisionStatus


class TestPaymentMethod:
    """PaymentMethodのテスト."""

    def test_値から生成できる(self) -> None:
        assert PaymentMethod("CARD") == PaymentMethod.CARD

    def test_表示名(self) -> None:
        assert PaymentMethod.CASH.get_display_name() == "現金"
        assert PaymentMethod.TRANSFER.get_display_name() == "振込"


class TestProvisionStatus:
    """ProvisionStatusのテスト."""

    def test_表示名(self) -> None:
        assert ProvisionStatus.OPEN.get_display_name() == "未消化"
        assert ProvisionStatus.CLOSED.get_display_name() == "消化済"
