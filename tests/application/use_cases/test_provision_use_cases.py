"""引当ユースケースのテスト."""
from datetime import date
from unittest.mock import MagicMock

import pytest

from budget_manager.application.use_cases import (
    CategoryNotFoundError,
    CreateExpenseUseCase,
    CreateProvisionUseCase,
    DeleteProvisionUseCase,
    GetProvisionsUseCase,
    GetProvisionUseCase,
    ProvisionConcurrencyError,
    ProvisionNotFoundError,
    UpdateProvisionUseCase,
)
from budget_manager.domain.entities import Category
from budget_manager.domain.enums import ProvisionStatus
from budget_manager.domain.errors import ValidationError
from budget_manager.domain.value_objects import Money, Period
from budget_manager.infrastructure.repositories import (
    InMemoryCategoryRepository,
    InMemoryExpenseRepository,
    InMemoryProvisionRepository,
)

MISSING_ID = "00000000-0000-4000-8000-000000000000"


def _setup() -> tuple[InMemoryCategoryRepository, InMemoryProvisionRepository, Category]:
    categories = InMemoryCategoryRepository()
    provisions = InMemoryProvisionRepository()
    category = Category.create(
        name="車関係", period=Period("2025-01"), monthly_budget=Money.of(800)
    )
    categories.save(category)
    return categories, provisions, category


class TestCreateProvisionUseCase:
    """CreateProvisionUseCaseのテスト."""

    def test_引当を作成できる(self) -> None:
        categories, provisions, category = _setup()

        provision = CreateProvisionUseCase(provisions, categories).execute(
            item=" 車検 ",
            category_id=category.category_id.value,
            amount=500,
            due_date="2025-03-31",
        )

        assert provision.item == "車検"
        assert provision.amount == Money.of(-500)
        assert provision.due_date == date(2025, 3, 31)
        assert provision.status == ProvisionStatus.OPEN
        assert provision.version == 1
        assert provisions.find_by_id(provision.provision_id).amount == Money.of(-500)

    def test_不正な入力はまとめてエラーになる(self) -> None:
        categories, provisions, _ = _setup()

        with pytest.raises(ValidationError) as exc_info:
            CreateProvisionUseCase(provisions, categories).execute(
                item="",
                category_id="bad",
                amount=0,
                due_date="someday",
                notes="x" * 501,
            )

        fields = [e.field for e in exc_info.value.errors]
        assert fields == ["item", "amount", "category_id", "due_date", "notes"]

    def test_存在しないカテゴリはエラー(self) -> None:
        categories, provisions, _ = _setup()

        with pytest.raises(CategoryNotFoundError):
            CreateProvisionUseCase(provisions, categories).execute(
                item="車検", category_id=MISSING_ID, amount=500, due_date="2025-03-31"
            )


class TestGetProvisionsUseCase:
    """GetProvisionsUseCase / GetProvisionUseCase のテスト."""

    def test_未消化のみ取得できる(self) -> None:
        categories, provisions, category = _setup()
        create = CreateProvisionUseCase(provisions, categories)
        open_provision = create.execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )
        closed = create.execute(
            item="保険", category_id=category.category_id.value, amount=100, due_date="2025-02-01"
        )
        UpdateProvisionUseCase(provisions, categories).execute(
            provision_id=closed.provision_id.value, status="CLOSED"
        )

        use_case = GetProvisionsUseCase(provisions)

        assert [p.provision_id for p in use_case.execute(only_open=True)] == [
            open_provision.provision_id
        ]
        assert len(use_case.execute()) == 2
        assert len(use_case.execute(category_id=category.category_id.value)) == 2

    def test_存在しない引当はエラー(self) -> None:
        with pytest.raises(ProvisionNotFoundError, match='Provision with id "missing" not found'):
            GetProvisionUseCase(InMemoryProvisionRepository()).execute("missing")


class TestUpdateProvisionUseCase:
    """UpdateProvisionUseCaseのテスト."""

    def test_手動でCLOSEDからOPENに戻せる(self) -> None:
        categories, provisions, category = _setup()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )
        use_case = UpdateProvisionUseCase(provisions, categories)

        use_case.execute(provision_id=provision.provision_id.value, status=ProvisionStatus.CLOSED)
        reopened = use_case.execute(provision_id=provision.provision_id.value, status="OPEN")

        assert reopened.status == ProvisionStatus.OPEN
        assert provisions.find_by_id(provision.provision_id).status == ProvisionStatus.OPEN

    def test_金額を使用額以下に減らすとCLOSEDになる(self) -> None:
        categories, provisions, category = _setup()
        expenses = InMemoryExpenseRepository()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )
        CreateExpenseUseCase(expenses, categories, provisions).execute(
            date="2025-01-10",
            description="頭金",
            category_id=category.category_id.value,
            amount=200,
            provision_id=provision.provision_id.value,
        )

        updated = UpdateProvisionUseCase(provisions, categories).execute(
            provision_id=provision.provision_id.value, amount=200
        )

        assert updated.amount == Money.of(-200)
        assert updated.status == ProvisionStatus.CLOSED

    def test_不正なステータスはエラー(self) -> None:
        categories, provisions, category = _setup()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )

        with pytest.raises(ValidationError, match="status must be one of: OPEN, CLOSED"):
            UpdateProvisionUseCase(provisions, categories).execute(
                provision_id=provision.provision_id.value, status="DONE"
            )

    def test_読み取り後に他の更新があると競合エラー(self) -> None:
        categories, provisions, category = _setup()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )

        class _RacingRepository(InMemoryProvisionRepository):
            def find_by_id(self, provision_id):
                found = super().find_by_id(provision_id)
                concurrent = super().find_by_id(provision_id)
                concurrent.item = "他の更新"
                self.save(concurrent)
                return found

        racing = _RacingRepository()
        racing.save(provisions.find_by_id(provision.provision_id))

        with pytest.raises(ProvisionConcurrencyError):
            UpdateProvisionUseCase(racing, categories).execute(
                provision_id=provision.provision_id.value, item="新しい名前"
            )


class TestDeleteProvisionUseCase:
    """DeleteProvisionUseCaseのテスト."""

    def test_紐づく支出は残して紐づけだけ外す(self) -> None:
        categories, provisions, category = _setup()
        expenses = InMemoryExpenseRepository()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )
        expense = CreateExpenseUseCase(expenses, categories, provisions).execute(
            date="2025-01-10",
            description="頭金",
            category_id=category.category_id.value,
            amount=200,
            provision_id=provision.provision_id.value,
        )

        DeleteProvisionUseCase(provisions, expenses).execute(provision.provision_id.value)

        assert provisions.find_by_id(provision.provision_id) is None
        remaining = expenses.find_by_id(expense.expense_id)
        assert remaining is not None
        assert remaining.provision_id is None

    def test_存在しない引当はエラー(self) -> None:
        with pytest.raises(ProvisionNotFoundError):
            DeleteProvisionUseCase(
                InMemoryProvisionRepository(), InMemoryExpenseRepository()
            ).execute("missing")

    def test_引当を削除してから紐づく支出を読む(self) -> None:
        categories, provisions, category = _setup()
        provision = CreateProvisionUseCase(provisions, categories).execute(
            item="車検", category_id=category.category_id.value, amount=500, due_date="2025-03-31"
        )
        manager = MagicMock()
        manager.provisions.find_by_id.return_value = provision
        manager.expenses.find_by_provision_id.return_value = []

        DeleteProvisionUseCase(manager.provisions, manager.expenses).execute(
            provision.provision_id.value
        )

        names = [name for name, _, _ in manager.mock_calls]
        assert names.index("provisions.delete") < names.index("expenses.find_by_provision_id")
