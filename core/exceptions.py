import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("rest_framework")


def _first_message(detail) -> str:
    """
    Pull one human-readable sentence out of a DRF error detail, which can be
    a string, a list of strings or a (nested) mapping of field -> errors.
    """
    if isinstance(detail, dict):
        if "message" in detail:
            return str(detail["message"])
        if "detail" in detail:
            return _first_message(detail["detail"])
        for field, errors in detail.items():
            if field == "non_field_errors":
                return _first_message(errors)
            return f"{field}: {_first_message(errors)}"
        return "Invalid input."
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid input."
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"success": false, "message": ..., "error"?: ...}``.

    - DRF exceptions keep their status code (400/401/403/404/...).
    - Field errors of a ``ValidationError`` are always returned under ``error``.
    - Anything else is logged and turned into a 500; the exception text is only
      exposed when ``DEBUG`` is on.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}")
        payload = {"success": False, "message": "Internal server error."}
        if settings.DEBUG:
            payload["error"] = str(exc)
        return Response(payload, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    payload = {"success": False, "message": _first_message(response.data)}
    if isinstance(exc, ValidationError) or settings.DEBUG:
        payload["error"] = response.data
    response.data = payload
    return response
