"""引当APIハンドラー."""
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
    CreateProvisionUseCase,
    DeleteProvisionUseCase,
    GetProvisionsUseCase,
    GetProvisionUseCase,
    UpdateProvisionUseCase,
)
from budget_manager.domain.entities import Provision


def provisions_handler(event: dict, context: Any, dependencies: Dependencies) -> dict:
    """引当APIルーティングハンドラー."""
    resource = event.get("resource", "")
    method = event.get("httpMethod", "")

    try:
        if resource == "/provisions" and method == "GET":
            return get_provisions_handler(event, dependencies)
        if resource == "/provisions" and method == "POST":
            return create_provision_handler(event, dependencies)
        if resource == "/provisions/{provision_id}" and method == "GET":
            return get_provision_handler(event, dependencies)
        if resource == "/provisions/{provision_id}" and method == "PUT":
            return update_provision_handler(event, dependencies)
        if resource == "/provisions/{provision_id}" and method == "DELETE":
            return delete_provision_handler(event, dependencies)
    except Exception as e:
        return exception_response(e, event)

    return bad_request_response("Unknown route", event=event)


def get_provisions_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当一覧を取得する.

    GET /provisions

    Query Parameters:
        category_id: カテゴリで絞り込み
        only_open: "true" の場合は未消化のみ
    """
    only_open = (get_query_parameter(event, "only_open") or "").lower() == "true"
    use_case = GetProvisionsUseCase(dependencies.provision_repository)
    provisions = use_case.execute(
        category_id=get_query_parameter(event, "category_id"),
        only_open=only_open,
    )
    return success_response([_to_dict(p) for p in provisions], event=event)


def create_provision_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当を作成する.

    POST /provisions
    """
    body = get_body(event)
    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        return bad_request_response("notes must be a string", event=event)

    use_case = CreateProvisionUseCase(
        provision_repository=dependencies.provision_repository,
        category_repository=dependencies.category_repository,
    )
    provision = use_case.execute(
        item=body.get("item"),
        category_id=body.get("category_id"),
        amount=body.get("amount"),
        due_date=body.get("due_date"),
        notes=notes,
    )
    return success_response(_to_dict(provision), status_code=201, event=event)


def get_provision_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当を取得する.

    GET /provisions/{provision_id}
    """
    provision_id = get_path_parameter(event, "provision_id")
    if not provision_id:
        return bad_request_response("provision_id is required", event=event)

    provision = GetProvisionUseCase(dependencies.provision_repository).execute(provision_id)
    return success_response(_to_dict(provision), event=event)


def update_provision_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当を更新する.

    PUT /provisions/{provision_id}
    """
    provision_id = get_path_parameter(event, "provision_id")
    if not provision_id:
        return bad_request_response("provision_id is required", event=event)
    body = get_body(event)
    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        return bad_request_response("notes must be a string", event=event)

    use_case = UpdateProvisionUseCase(
        provision_repository=dependencies.provision_repository,
        category_repository=dependencies.category_repository,
    )
    provision = use_case.execute(
        provision_id=provision_id,
        item=body.get("item"),
        category_id=body.get("category_id"),
        amount=body.get("amount"),
        due_date=body.get("due_date"),
        notes=notes,
        status=body.get("status"),
    )
    return success_response(_to_dict(provision), event=event)


def delete_provision_handler(event: dict, dependencies: Dependencies) -> dict:
    """引当を削除する（紐づく支出は紐づけを外して残す）.

    DELETE /provisions/{provision_id}
    """
    provision_id = get_path_parameter(event, "provision_id")
    if not provision_id:
        return bad_request_response("provision_id is required", event=event)

    use_case = DeleteProvisionUseCase(
        provision_repository=dependencies.provision_repository,
        expense_repository=dependencies.expense_repository,
    )
    use_case.execute(provision_id)
    return no_content_response(event=event)


def _to_dict(provision: Provision) -> dict:
    return {
        "provision_id": provision.provision_id.value,
        "item": provision.item,
        "category_id": provision.category_id.value,
        "amount": provision.amount.to_float(),
        "used_amount": provision.used_amount.to_float(),
        "remaining_balance": provision.remaining_balance().to_float(),
        "due_date": provision.due_date.isoformat(),
        "status": provision.status.value,
        "notes": provision.notes,
        "created_at": provision.created_at.isoformat(),
        "updated_at": provision.updated_at.isoformat(),
    }
