"""予算利用可能額ドメインサービス."""
from ..entities import Category, Expense, Provision
from ..value_objects import ExecutiveSummary, Money


class BudgetAvailabilityService:
    """カテゴリの予算から支出と未消化引当を差し引いた利用可能額を計算する."""

    @staticmethod
    def calculate_spent(expenses: list[Expense]) -> Money:
        """支出額の合計（絶対値）."""
        total = Money.zero()
        for expense in expenses:
            total = total.add(expense.amount.absolute())
        return total

    @staticmethod
    def calculate_reserved(provisions: list[Provision]) -> Money:
        """未消化引当の残額の合計.

        残額が負（使い過ぎ）の引当もそのまま合算する。
        """
        total = Money.zero()
        for provision in provisions:
            if provision.is_open():
                total = total.add(provision.remaining_balance())
        return total

    @staticmethod
    def calculate_available(
        monthly_budget: Money,
        expenses: list[Expense],
        provisions: list[Provision],
    ) -> Money:
        """利用可能額 = 月次予算 - 支出 - 未消化引当残額."""
        spent = BudgetAvailabilityService.calculate_spent(expenses)
        reserved = BudgetAvailabilityService.calculate_reserved(provisions)
        return monthly_budget.subtract(spent).subtract(reserved)

    @staticmethod
    def summarize(
        category: Category,
        expenses: list[Expense],
        provisions: list[Provision],
    ) -> ExecutiveSummary:
        """カテゴリのエグゼクティブサマリーを作成する."""
        return ExecutiveSummary(
            category_id=category.category_id,
            category_name=category.name,
            period=category.period,
            monthly_budget=category.monthly_budget,
            monthly_spent=BudgetAvailabilityService.calculate_spent(expenses),
            monthly_open_provisions=BudgetAvailabilityService.calculate_reserved(provisions),
            monthly_available=BudgetAvailabilityService.calculate_available(
                category.monthly_budget, expenses, provisions
            ),
        )
