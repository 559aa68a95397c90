"""インメモリリポジトリのテスト."""
from datetime import date

from budget_manager.domain.entities import Category, Expense, Provision
from budget_manager.domain.enums import ProvisionStatus
from budget_manager.domain.identifiers import CategoryId, ProvisionId
from budget_manager.domain.value_objects import Money, Period
from budget_manager.infrastructure.repositories import (
    InMemoryCategoryRepository,
    InMemoryExpenseRepository,
    InMemoryProvisionRepository,
)

CATEGORY_ID = CategoryId("7f1d2a36-3c1e-4a53-9f55-2b1f3c4d5e6f")


def _make_expense(day: int, amount: float = -10, provision_id: ProvisionId | None = None) -> Expense:
    return Expense.create(
        date=date(2025, 1, day),
        description=f"{day}日の支出",
        category_id=CATEGORY_ID,
        amount=Money.of(amount),
        provision_id=provision_id,
    )


def _make_provision(due_day: int = 31) -> Provision:
    return Provision.create(
        item="引当",
        category_id=CATEGORY_ID,
        amount=Money.of(-100),
        due_date=date(2025, 1, due_day),
    )


class TestInMemoryCategoryRepository:
    """InMemoryCategoryRepositoryのテスト."""

    def test_期間で検索できる(self) -> None:
        repo = InMemoryCategoryRepository()
        jan = Category.create(name="食費", period=Period("2025-01"), monthly_budget=Money.of(1))
        feb = Category.create(name="食費", period=Period("2025-02"), monthly_budget=Money.of(1))
        repo.save(jan)
        repo.save(feb)

        assert repo.find_by_period(Period("2025-02")) == [feb]
        assert repo.find_all() == [jan, feb]

    def test_取得したカテゴリを変更しても保存済みの状態は変わらない(self) -> None:
        repo = InMemoryCategoryRepository()
        category = Category.create(name="食費", period=Period("2025-01"), monthly_budget=Money.of(1))
        repo.save(category)

        repo.find_by_id(category.category_id).name = "変更"

        assert repo.find_by_id(category.category_id).name == "食費"

    def test_削除できる(self) -> None:
        repo = InMemoryCategoryRepository()
        category = Category.create(name="食費", period=Period("2025-01"), monthly_budget=Money.of(1))
        repo.save(category)

        repo.delete(category.category_id)

        assert repo.find_by_id(category.category_id) is None


class TestInMemoryExpenseRepository:
    """InMemoryExpenseRepositoryのテスト."""

    def test_取得した支出を変更しても保存済みの状態は変わらない(self) -> None:
        repo = InMemoryExpenseRepository()
        expense = _make_expense(5)
        repo.save(expense)

        found = repo.find_by_id(expense.expense_id)
        found.description = "変更"
        expense.description = "保存後の変更"

        assert repo.find_by_id(expense.expense_id).description == "5日の支出"

    def test_日付範囲は両端を含む(self) -> None:
        repo = InMemoryExpenseRepository()
        for day in (1, 10, 20, 31):
            repo.save(_make_expense(day))

        found = repo.find_by_date_range(date(2025, 1, 10), date(2025, 1, 20))

        assert [e.date.day for e in found] == [20, 10]

    def test_引当ごとの合計は0以下(self) -> None:
        repo = InMemoryExpenseRepository()
        provision_id = ProvisionId("p-1")
        repo.save(_make_expense(1, -100, provision_id))
        repo.save(_make_expense(2, -25.5, provision_id))
        repo.save(_make_expense(3, -999))

        assert repo.sum_amount_by_provision_id(provision_id) == Money.of(-125.5)
        assert repo.sum_amount_by_provision_id(ProvisionId("none")).is_zero()
        assert len(repo.find_by_provision_id(provision_id)) == 2


class TestInMemoryProvisionRepository:
    """InMemoryProvisionRepositoryのテスト."""

    def test_保存するたびにversionが進む(self) -> None:
        repo = InMemoryProvisionRepository()
        provision = _make_provision()

        repo.save(provision)
        repo.save(provision)

        assert provision.version == 2
        assert repo.find_by_id(provision.provision_id).version == 2

    def test_取得した引当を変更しても保存済みの状態は変わらない(self) -> None:
        repo = InMemoryProvisionRepository()
        provision = _make_provision()
        repo.save(provision)

        found = repo.find_by_id(provision.provision_id)
        found.status = ProvisionStatus.CLOSED

        assert repo.find_by_id(provision.provision_id).status == ProvisionStatus.OPEN

    def test_versionが一致すれば保存できる(self) -> None:
        repo = InMemoryProvisionRepository()
        provision = _make_provision()
        repo.save(provision)

        found = repo.find_by_id(provision.provision_id)
        found.used_amount = Money.of(50)

        assert repo.save_if_unchanged(found, expected_version=1) is True
        assert found.version == 2
        assert repo.find_by_id(provision.provision_id).used_amount == Money.of(50)

    def test_versionが一致しなければ保存しない(self) -> None:
        repo = InMemoryProvisionRepository()
        provision = _make_provision()
        repo.save(provision)
        stale = repo.find_by_id(provision.provision_id)
        repo.save(repo.find_by_id(provision.provision_id))

        stale.used_amount = Money.of(50)

        assert repo.save_if_unchanged(stale, expected_version=1) is False
        assert stale.version == 1
        assert repo.find_by_id(provision.provision_id).used_amount.is_zero()

    def test_未消化のみを期日順に取得できる(self) -> None:
        repo = InMemoryProvisionRepository()
        late, early, closed = _make_provision(31), _make_provision(5), _make_provision(1)
        closed.status = ProvisionStatus.CLOSED
        for provision in (late, early, closed):
            repo.save(provision)

        found = repo.find_open()

        assert [p.provision_id for p in found] == [early.provision_id, late.provision_id]
