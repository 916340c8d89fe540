import logging
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "The given data was invalid."


def _field_name(loc) -> str:
    """Имя поля из location ошибки pydantic, например ("body", "title") -> "title".

    Числовые части (позиция в JSON или индекс списка) полем не считаются.
    """
    parts = [part for part in loc if isinstance(part, str) and part not in ("body", "query", "path", "header")]
    if parts:
        return parts[-1]
    return "body"


def _error_key(error: Dict[str, Any]) -> str:
    # Тело запроса не разобрано как JSON, поля неизвестны
    if error.get("type") == "json_invalid":
        return "body"
    return _field_name(error.get("loc", ()))


def _error_message(error: Dict[str, Any]) -> str:
    field = _error_key(error)

    if error.get("type") == "missing":
        return f"The {field} field is required."

    # Для ValueError из валидаторов берем исходный текст без префикса pydantic
    ctx_error = error.get("ctx", {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)

    return error.get("msg", "Invalid value")


def format_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Группировка ошибок валидации по полям"""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        field = _error_key(error)
        grouped.setdefault(field, []).append(_error_message(error))
    return grouped


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Ответ 422 с ошибками, сгруппированными по полям"""
    errors = format_validation_errors(exc.errors())
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, list(errors))
    return JSONResponse(
        status_code=422,
        content={"message": VALIDATION_MESSAGE, "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Обработка непредвиденных исключений"""
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )
