"""API リクエストユーティリティ."""
import json
from typing import Any


def get_body(event: dict) -> dict[str, Any]:
    """リクエストボディを JSON としてパースする.

    Raises:
        ValueError: JSON として不正、またはオブジェクトでない場合
    """
    raw = event.get("body")
    if raw is None or raw == "":
        return {}
    try:
        body = json.loads(raw)
    except json.JSONDecodeError:
        raise ValueError("Invalid JSON body") from None
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def get_path_parameter(event: dict, name: str) -> str | None:
    """パスパラメータを取得する."""
    params = event.get("pathParameters") or {}
    return params.get(name)


def get_query_parameter(event: dict, name: str, default: str | None = None) -> str | None:
    """クエリパラメータを取得する."""
    params = event.get("queryStringParameters") or {}
    return params.get(name, default)
