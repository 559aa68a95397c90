"""レポートAPIハンドラー."""
from typing import Any

from budget_manager.api.dependencies import Dependencies
from budget_manager.api.errors import exception_response
from budget_manager.api.request import get_path_parameter, get_query_parameter
from budget_manager.api.response import bad_request_response, success_response
from budget_manager.application.use_cases import (
    GetExecutiveSummaryUseCase,
    GetProvisionFulfillmentReportUseCase,
)
from budget_manager.domain.value_objects import Period


def reports_handler(event: dict, context: Any, dependencies: Dependencies) -> dict:
    """レポートAPIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    try:
        if resource == "/reports/executive-summary" and method == "GET":
            return get_executive_summary_handler(event, dependencies)
        if resource == "/reports/executive-summary/{category_id}" and method == "GET":
            return get_category_summary_handler(event, dependencies)
        if resource == "/reports/provision-fulfillment" and method == "GET":
            return get_provision_fulfillment_handler(event, dependencies)
    except Exception as e:
        return exception_response(e, event)

    return bad_request_response("Unknown route", event=event)


def _summary_use_case(dependencies: Dependencies) -> GetExecutiveSummaryUseCase:
    return GetExecutiveSummaryUseCase(
        category_repository=dependencies.category_repository,
        expense_repository=dependencies.expense_repository,
        provision_repository=dependencies.provision_repository,
    )


def get_executive_summary_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリごとのエグゼクティブサマリーを取得する.

    GET /reports/executive-summary?period=YYYY-MM
    """
    summaries = _summary_use_case(dependencies).execute(
        period=get_query_parameter(event, "period")
    )
    return success_response([s.to_dict() for s in summaries], event=event)


def get_category_summary_handler(event: dict, dependencies: Dependencies) -> dict:
    """1カテゴリのエグゼクティブサマリーを取得する.

    GET /reports/executive-summary/{category_id}
    """
    category_id = get_path_parameter(event, "category_id")
    if not category_id:
        return bad_request_response("category_id is required", event=event)

    summary = _summary_use_case(dependencies).execute_for_category(category_id)
    return success_response(summary.to_dict(), event=event)


def get_provision_fulfillment_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当消化レポートを取得する.

    GET /reports/provision-fulfillment?period=YYYY-MM（省略時は今月）
    """
    period = get_query_parameter(event, "period") or Period.now().value
    use_case = GetProvisionFulfillmentReportUseCase(
        category_repository=dependencies.category_repository,
        provision_repository=dependencies.provision_repository,
    )
    return success_response(use_case.execute(period).to_dict(), event=event)
