"""引当消化レポート取得ユースケース."""
from __future__ import annotations

from datetime import date

from budget_manager.domain.ports import CategoryRepository, ProvisionRepository
from budget_manager.domain.services import ValidationService
from budget_manager.domain.value_objects import Period, ProvisionFulfillmentReport


class GetProvisionFulfillmentReportUseCase:
    """引当消化レポート取得ユースケース."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        provision_repository: ProvisionRepository,
    ) -> None:
        """初期化."""
        self._category_repository = category_repository
        self._provision_repository = provision_repository

    def execute(self, period: str, today: date | None = None) -> ProvisionFulfillmentReport:
        """期間内のカテゴリに属する引当の消化状況を集計する."""
        ValidationService.validate_period_format(period, "period")
        target_period = Period(period)

        provisions = []
        for category in self._category_repository.find_by_period(target_period):
            provisions.extend(
                self._provision_repository.find_by_category_id(category.category_id)
            )
        return ProvisionFulfillmentReport.from_provisions(target_period, provisions, today=today)
