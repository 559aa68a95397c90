"""例外からAPIレスポンスへの変換."""
import logging

from budget_manager.application.use_cases import (
    CategoryNotFoundError,
    ExpenseNotFoundError,
    ProvisionConcurrencyError,
    ProvisionNotFoundError,
)
from budget_manager.domain.errors import ValidationError

from .response import (
    bad_request_response,
    conflict_response,
    internal_error_response,
    not_found_response,
)

logger = logging.getLogger(__name__)

NOT_FOUND_ERRORS = (CategoryNotFoundError, ExpenseNotFoundError, ProvisionNotFoundError)


def exception_response(error: Exception, event: dict | None = None) -> dict:
    """ハンドラーで発生した例外を対応するHTTPレスポンスに変換する.

    想定外の例外はスタックトレース付きでログに残し、500 を返す。
    """
    if isinstance(error, ValidationError):
        details = [e.to_dict() for e in error.errors] or None
        return bad_request_response(error.message, details=details, event=event)
    if isinstance(error, NOT_FOUND_ERRORS):
        return not_found_response(str(error), event=event)
    if isinstance(error, ProvisionConcurrencyError):
        return conflict_response(str(error), event=event)
    if isinstance(error, ValueError):
        return bad_request_response(str(error), event=event)

    logger.error("Unhandled error", exc_info=error)
    return internal_error_response(event=event)
