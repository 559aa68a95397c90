"""Lambda エントリーポイント."""
import logging
import os
from typing import Any, Callable

from budget_manager.api.dependencies import Dependencies
from budget_manager.api.handlers import (
    categories_handler,
    expenses_handler,
    provisions_handler,
    reports_handler,
)
from budget_manager.api.response import bad_request_response, success_response

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

ROUTES: list[tuple[str, Callable[[dict, Any, Dependencies], dict]]] = [
    ("/categories", categories_handler),
    ("/expenses", expenses_handler),
    ("/provisions", provisions_handler),
    ("/reports", reports_handler),
]

_handler: Callable[[dict, Any], dict] | None = None


def create_handler(dependencies: Dependencies) -> Callable[[dict, Any], dict]:
    """依存性を束縛した Lambda ハンドラーを生成する."""

    def handler(event: dict, context: Any) -> dict:
        """resource のプレフィックスで各ハンドラーに振り分ける."""
        resource = event.get("resource", "")
        if event.get("httpMethod") == "OPTIONS":
            return success_response({}, event=event)

        for prefix, route_handler in ROUTES:
            if resource == prefix or resource.startswith(prefix + "/"):
                return route_handler(event, context, dependencies)

        logger.warning(f"No route for {event.get('httpMethod')} {resource}")
        return bad_request_response("Unknown route", event=event)

    return handler


def lambda_handler(event: dict, context: Any) -> dict:
    """環境変数から依存性を組み立てて処理する（初回呼び出し時に組み立て）."""
    global _handler
    if _handler is None:
        _handler = create_handler(Dependencies.from_env())
    return _handler(event, context)

