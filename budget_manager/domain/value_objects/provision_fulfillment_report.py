"""引当消化レポートの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from .money import Money
from .period import Period

if TYPE_CHECKING:
    from ..entities.provision import Provision

UPCOMING_DAYS = 7


@dataclass(frozen=True)
class ProvisionFulfillmentReport:
    """期間内の引当の消化状況."""

    period: Period
    total_provisioned: Money
    total_open: Money
    total_closed: Money
    fulfillment_rate: float
    open_count: int
    closed_count: int
    overdue_count: int
    overdue_amount: Money
    upcoming_count: int

    @classmethod
    def from_provisions(
        cls,
        period: Period,
        provisions: list[Provision],
        today: date | None = None,
    ) -> ProvisionFulfillmentReport:
        """引当リストからレポートを生成する.

        期限切れは期日が今日より前の未消化引当、直近は7日以内に期日を迎える未消化引当。
        """
        effective_today = today or date.today()
        upcoming_limit = effective_today + timedelta(days=UPCOMING_DAYS)

        total_provisioned = Money.zero()
        total_open = Money.zero()
        total_closed = Money.zero()
        overdue_amount = Money.zero()
        open_count = closed_count = overdue_count = upcoming_count = 0

        for provision in provisions:
            reserved = provision.amount.absolute()
            total_provisioned = total_provisioned.add(reserved)
            if provision.is_open():
                open_count += 1
                total_open = total_open.add(reserved)
                if provision.due_date < effective_today:
                    overdue_count += 1
                    overdue_amount = overdue_amount.add(provision.remaining_balance())
                elif provision.due_date <= upcoming_limit:
                    upcoming_count += 1
            else:
                closed_count += 1
                total_closed = total_closed.add(reserved)

        fulfillment_rate = 0.0
        if total_provisioned.is_positive():
            fulfillment_rate = round(
                float(total_closed.value / total_provisioned.value * 100), 2
            )

        return cls(
            period=period,
            total_provisioned=total_provisioned,
            total_open=total_open,
            total_closed=total_closed,
            fulfillment_rate=fulfillment_rate,
            open_count=open_count,
            closed_count=closed_count,
            overdue_count=overdue_count,
            overdue_amount=overdue_amount,
            upcoming_count=upcoming_count,
        )

    def to_dict(self) -> dict:
        """API応答用の辞書に変換する."""
        return {
            "period": self.period.value,
            "total_provisioned": self.total_provisioned.to_float(),
            "total_open": self.total_open.to_float(),
            "total_closed": self.total_closed.to_float(),
            "fulfillment_rate": self.fulfillment_rate,
            "open_count": self.open_count,
            "closed_count": self.closed_count,
            "overdue_count": self.overdue_count,
            "overdue_amount": self.overdue_amount.to_float(),
            "upcoming_count": self.upcoming_count,
        }
