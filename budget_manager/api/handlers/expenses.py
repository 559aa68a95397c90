"""支出APIハンドラー."""
from typing import Any

from budget_manager.api.dependencies import Dependencies
from budget_manager.api.errors import exception_response
from budget_manager.api.request import get_body, get_path_parameter, get_query_parameter
from budget_manager.api.response import (
    bad_request_response,
    no_content_response,
    success_response,
)
from budget_manager.application.use_cases import (
    CreateExpenseUseCase,
    DeleteExpenseUseCase,
    GetExpensesUseCase,
    GetExpenseUseCase,
    UpdateExpenseUseCase,
)
from budget_manager.domain.entities import Expense
from budget_manager.domain.enums import PaymentMethod


def expenses_handler(event: dict, context: Any, dependencies: Dependencies) -> dict:
    """支出APIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    try:
        if resource == "/expenses" and method == "GET":
            return get_expenses_handler(event, dependencies)
        if resource == "/expenses" and method == "POST":
            return create_expense_handler(event, dependencies)
        if resource == "/expenses/{expense_id}" and method == "GET":
            return get_expense_handler(event, dependencies)
        if resource == "/expenses/{expense_id}" and method == "PUT":
            return update_expense_handler(event, dependencies)
        if resource == "/expenses/{expense_id}" and method == "DELETE":
            return delete_expense_handler(event, dependencies)
    except Exception as e:
        return exception_response(e, event)

    return bad_request_response("Unknown route", event=event)


def get_expenses_handler(event: dict, dependencies: Dependencies) -> dict:
    """支出一覧を取得する.

    GET /expenses

    Query Parameters:
        category_id: カテゴリで絞り込み
        provision_id: 引当で絞り込み
        start_date, end_date: 日付範囲（YYYY-MM-DD、両端を含む）
    """
    use_case = GetExpensesUseCase(dependencies.expense_repository)
    expenses = use_case.execute(
        category_id=get_query_parameter(event, "category_id"),
        provision_id=get_query_parameter(event, "provision_id"),
        start_date=get_query_parameter(event, "start_date"),
        end_date=get_query_parameter(event, "end_date"),
    )
    return success_response([_to_dict(e) for e in expenses], event=event)


def create_expense_handler(event: dict, dependencies: Dependencies) -> dict:
    """支出を作成する.

    POST /expenses
    """
    body = get_body(event)
    use_case = CreateExpenseUseCase(
        expense_repository=dependencies.expense_repository,
        category_repository=dependencies.category_repository,
        provision_repository=dependencies.provision_repository,
    )
    expense = use_case.execute(
        date=body.get("date"),
        description=body.get("description"),
        category_id=body.get("category_id"),
        amount=body.get("amount"),
        payment_method=body.get("payment_method", PaymentMethod.CASH.value),
        provision_id=body.get("provision_id"),
    )
    return success_response(_to_dict(expense), status_code=201, event=event)


def get_expense_handler(event: dict, dependencies: Dependencies) -> dict:
    """支出を取得する.

    GET /expenses/{expense_id}
    """
    expense_id = get_path_parameter(event, "expense_id")
    if not expense_id:
        return bad_request_response("expense_id is required", event=event)

    expense = GetExpenseUseCase(dependencies.expense_repository).execute(expense_id)
    return success_response(_to_dict(expense), event=event)


def update_expense_handler(event: dict, dependencies: Dependencies) -> dict:
    """支出を更新する.

    PUT /expenses/{expense_id}

    provision_id に null を指定すると引当との紐づけを外す。
    """
    expense_id = get_path_parameter(event, "expense_id")
    if not expense_id:
        return bad_request_response("expense_id is required", event=event)
    body = get_body(event)

    use_case = UpdateExpenseUseCase(
        expense_repository=dependencies.expense_repository,
        category_repository=dependencies.category_repository,
        provision_repository=dependencies.provision_repository,
    )
    expense = use_case.execute(
        expense_id=expense_id,
        date=body.get("date"),
        description=body.get("description"),
        category_id=body.get("category_id"),
        amount=body.get("amount"),
        payment_method=body.get("payment_method"),
        provision_id=body.get("provision_id"),
        unlink_provision="provision_id" in body and body["provision_id"] is None,
    )
    return success_response(_to_dict(expense), event=event)


def delete_expense_handler(event: dict, dependencies: Dependencies) -> dict:
    """支出を削除する.

    DELETE /expenses/{expense_id}
    """
    expense_id = get_path_parameter(event, "expense_id")
    if not expense_id:
        return bad_request_response("expense_id is required", event=event)

    use_case = DeleteExpenseUseCase(
        expense_repository=dependencies.expense_repository,
        provision_repository=dependencies.provision_repository,
    )
    use_case.execute(expense_id)
    return no_content_response(event=event)


def _to_dict(expense: Expense) -> dict:
    return {
        "expense_id": expense.expense_id.value,
        "date": expense.date.isoformat(),
        "description": expense.description,
        "category_id": expense.category_id.value,
        "amount": expense.amount.to_float(),
        "payment_method": expense.payment_method.value,
        "provision_id": expense.provision_id.value if expense.provision_id else None,
        "created_at": expense.created_at.isoformat(),
        "updated_at": expense.updated_at.isoformat(),
    }
