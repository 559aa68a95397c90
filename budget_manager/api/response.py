"""API レスポンスユーティリティ."""
import json
import os
from typing import Any

DEFAULT_ALLOWED_ORIGINS = ["http://localhost:3000"]


def get_allowed_origins() -> list[str]:
    """許可するオリジン一覧を返す（ALLOWED_ORIGINS はカンマ区切り）."""
    configured = os.environ.get("ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in configured.split(",") if origin.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def get_cors_origin(event: dict | None = None) -> str:
    """リクエストの Origin ヘッダーから許可するオリジンを返す."""
    allowed = get_allowed_origins()
    if event:
        headers = event.get("headers") or {}
        origin = headers.get("origin") or headers.get("Origin") or ""
        if origin in allowed:
            return origin
    return allowed[0]


def _headers(event: dict | None) -> dict:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_cors_origin(event),
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    }


def success_response(body: Any, status_code: int = 200, event: dict | None = None) -> dict:
    """成功レスポンスを生成する.

    Args:
        body: レスポンスボディ
        status_code: HTTPステータスコード
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False, default=str),
    }


def no_content_response(event: dict | None = None) -> dict:
    """204 No Contentレスポンスを生成する."""
    return {
        "statusCode": 204,
        "headers": _headers(event),
        "body": "",
    }


def error_response(
    message: str,
    status_code: int = 400,
    error_code: str | None = None,
    details: list | None = None,
    event: dict | None = None,
) -> dict:
    """エラーレスポンスを生成する.

    Args:
        message: エラーメッセージ
        status_code: HTTPステータスコード
        error_code: エラーコード
        details: 項目ごとのエラー詳細
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    body: dict = {"error": {"message": message}}
    if error_code:
        body["error"]["code"] = error_code
    if details:
        body["error"]["details"] = details

    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False, default=str),
    }


def bad_request_response(
    message: str, details: list | None = None, event: dict | None = None
) -> dict:
    """400 Bad Requestレスポンスを生成する."""
    return error_response(
        message, status_code=400, error_code="BAD_REQUEST", details=details, event=event
    )


def not_found_response(message: str = "Resource not found", event: dict | None = None) -> dict:
    """404 Not Foundレスポンスを生成する."""
    return error_response(message, status_code=404, error_code="NOT_FOUND", event=event)


def conflict_response(message: str, event: dict | None = None) -> dict:
    """409 Conflictレスポンスを生成する."""
    return error_response(message, status_code=409, error_code="CONFLICT", event=event)


def internal_error_response(
    message: str = "Internal server error", event: dict | None = None
) -> dict:
    """500 Internal Server Errorレスポンスを生成する."""
    return error_response(message, status_code=500, error_code="INTERNAL_ERROR", event=event)
