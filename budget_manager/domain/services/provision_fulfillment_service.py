"""引当消化ドメインサービス."""
from ..entities import Expense, Provision
from ..value_objects import Money


class ProvisionFulfillmentService:
    """引当の使用額と消化状態を扱うサービス."""

    @staticmethod
    def calculate_used_amount(expenses: list[Expense]) -> Money:
        """紐づく支出の絶対値の合計を使用額として返す."""
        total = Money.zero()
        for expense in expenses:
            total = total.add(expense.amount.absolute())
        return total

    @staticmethod
    def is_fulfilled(provision: Provision, used_amount: Money) -> bool:
        """使用額が引当額に達しているか判定する."""
        return used_amount.greater_than_or_equal(provision.amount.absolute())

    @staticmethod
    def fulfill(provision: Provision, used_amount: Money) -> bool:
        """使用額を引当に反映する.

        Returns:
            今回の反映で OPEN から CLOSED に遷移した場合 True
        """
        return provision.apply_used_amount(used_amount)

    @staticmethod
    def remaining_balance(provision: Provision) -> Money:
        """引当の残額を返す（使い過ぎの場合は負になる）."""
        return provision.remaining_balance()
