"""カテゴリAPIハンドラー."""
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
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoriesUseCase,
    GetCategoryUseCase,
    UpdateCategoryUseCase,
)
from budget_manager.domain.entities import Category


def categories_handler(event: dict, context: Any, dependencies: Dependencies) -> dict:
    """カテゴリAPIルーティングハンドラー.

    リクエストのresourceとhttpMethodに基づいて適切なハンドラーに振り分ける。
    """
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    try:
        if resource == "/categories" and method == "GET":
            return get_categories_handler(event, dependencies)
        if resource == "/categories" and method == "POST":
            return create_category_handler(event, dependencies)
        if resource == "/categories/{category_id}" and method == "GET":
            return get_category_handler(event, dependencies)
        if resource == "/categories/{category_id}" and method == "PUT":
            return update_category_handler(event, dependencies)
        if resource == "/categories/{category_id}" and method == "DELETE":
            return delete_category_handler(event, dependencies)
    except Exception as e:
        return exception_response(e, event)

    return bad_request_response("Unknown route", event=event)


def get_categories_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリ一覧を取得する.

    GET /categories?period=YYYY-MM
    """
    use_case = GetCategoriesUseCase(dependencies.category_repository)
    categories = use_case.execute(period=get_query_parameter(event, "period"))
    return success_response([_to_dict(c) for c in categories], event=event)


def create_category_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリを作成する.

    POST /categories
    """
    body = get_body(event)
    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        return bad_request_response("notes must be a string", event=event)

    use_case = CreateCategoryUseCase(dependencies.category_repository)
    category = use_case.execute(
        name=body.get("name"),
        period=body.get("period"),
        monthly_budget=body.get("monthly_budget"),
        notes=notes,
    )
    return success_response(_to_dict(category), status_code=201, event=event)


def get_category_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリを取得する.

    GET /categories/{category_id}
    """
    category_id = get_path_parameter(event, "category_id")
    if not category_id:
        return bad_request_response("category_id is required", event=event)

    category = GetCategoryUseCase(dependencies.category_repository).execute(category_id)
    return success_response(_to_dict(category), event=event)


def update_category_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリを更新する.

    PUT /categories/{category_id}
    """
    category_id = get_path_parameter(event, "category_id")
    if not category_id:
        return bad_request_response("category_id is required", event=event)
    body = get_body(event)
    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        return bad_request_response("notes must be a string", event=event)

    use_case = UpdateCategoryUseCase(dependencies.category_repository)
    category = use_case.execute(
        category_id=category_id,
        name=body.get("name"),
        period=body.get("period"),
        monthly_budget=body.get("monthly_budget"),
        notes=notes,
    )
    return success_response(_to_dict(category), event=event)


def delete_category_handler(event: dict, dependencies: Dependencies) -> dict:
    """カテゴリを削除する（所属する支出・引当も削除）.

    DELETE /categories/{category_id}
    """
    category_id = get_path_parameter(event, "category_id")
    if not category_id:
        return bad_request_response("category_id is required", event=event)

    use_case = DeleteCategoryUseCase(
        category_repository=dependencies.category_repository,
        expense_repository=dependencies.expense_repository,
        provision_repository=dependencies.provision_repository,
    )
    use_case.execute(category_id)
    return no_content_response(event=event)


def _to_dict(category: Category) -> dict:
    return {
        "category_id": category.category_id.value,
        "name": category.name,
        "period": category.period.value,
        "monthly_budget": category.monthly_budget.to_float(),
        "notes": category.notes,
        "created_at": category.created_at.isoformat(),
        "updated_at": category.updated_at.isoformat(),
    }
