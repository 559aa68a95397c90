"""レポートAPIハンドラーのテスト."""
import json
from datetime import date

from budget_manager.api.dependencies import Dependencies
from budget_manager.api.handlers.reports import reports_handler
from budget_manager.domain.entities import Category, Expense, Provision
from budget_manager.domain.value_objects import Money, Period


def _event(resource: str, path_params: dict | None = None, query_params: dict | None = None) -> dict:
    event: dict = {"resource": resource, "httpMethod": "GET"}
    if path_params is not None:
        event["pathParameters"] = path_params
    if query_params is not None:
        event["queryStringParameters"] = query_params
    return event


def _seed(deps: Dependencies) -> Category:
    category = Category.create(
        name="食費", period=Period("2025-01"), monthly_budget=Money.of(1000)
    )
    deps.category_repository.save(category)
    deps.expense_repository.save(Expense.create(
        date=date(2025, 1, 5),
        description="スーパー",
        category_id=category.category_id,
        amount=Money.of(-200),
    ))
    deps.provision_repository.save(Provision.create(
        item="年会費",
        category_id=category.category_id,
        amount=Money.of(-300),
        due_date=date(2025, 1, 20),
    ))
    return category


class TestExecutiveSummaryHandler:
    """GET /reports/executive-summary のテスト."""

    def test_期間のサマリーを返す(self) -> None:
        deps = Dependencies.in_memory()
        _seed(deps)

        result = reports_handler(
            _event("/reports/executive-summary", query_params={"period": "2025-01"}),
            None,
            deps,
        )

        body = json.loads(result["body"])
        assert result["statusCode"] == 200
        assert len(body) == 1
        assert body[0]["monthly_spent"] == 200
        assert body[0]["monthly_open_provisions"] == 300
        assert body[0]["monthly_available"] == 500
        assert body[0]["semester_budget"] == 6000

    def test_不正な期間は400(self) -> None:
        deps = Dependencies.in_memory()

        result = reports_handler(
            _event("/reports/executive-summary", query_params={"period": "2025-1"}),
            None,
            deps,
        )

        assert result["statusCode"] == 400

    def test_カテゴリ単位のサマリー(self) -> None:
        deps = Dependencies.in_memory()
        category = _seed(deps)

        result = reports_handler(
            _event(
                "/reports/executive-summary/{category_id}",
                path_params={"category_id": category.category_id.value},
            ),
            None,
            deps,
        )

        assert result["statusCode"] == 200
        assert json.loads(result["body"])["category_name"] == "食費"

    def test_存在しないカテゴリは404(self) -> None:
        deps = Dependencies.in_memory()

        result = reports_handler(
            _event(
                "/reports/executive-summary/{category_id}",
                path_params={"category_id": "missing"},
            ),
            None,
            deps,
        )

        assert result["statusCode"] == 404


class TestProvisionFulfillmentHandler:
    """GET /reports/provision-fulfillment のテスト."""

    def test_期間の引当消化状況を返す(self) -> None:
        deps = Dependencies.in_memory()
        _seed(deps)

        result = reports_handler(
            _event("/reports/provision-fulfillment", query_params={"period": "2025-01"}),
            None,
            deps,
        )

        body = json.loads(result["body"])
        assert result["statusCode"] == 200
        assert body["period"] == "2025-01"
        assert body["total_provisioned"] == 300
        assert body["open_count"] == 1
        assert body["fulfillment_rate"] == 0.0

    def test_期間省略時は今月(self) -> None:
        deps = Dependencies.in_memory()

        result = reports_handler(_event("/reports/provision-fulfillment"), None, deps)

        body = json.loads(result["body"])
        assert body["period"] == Period.now().value
        assert body["total_provisioned"] == 0


class TestUnsupportedReportRoutes:
    """提供しないレポートルートのテスト."""

    def test_カテゴリ詳細や期間比較のルートは400(self) -> None:
        deps = Dependencies.in_memory()

        for resource in (
            "/reports/category-detail/{category_id}",
            "/reports/period-comparison",
            "/reports/payment-methods",
        ):
            result = reports_handler(_event(resource), None, deps)

            assert result["statusCode"] == 400
            assert json.loads(result["body"])["error"]["message"] == "Unknown route"
