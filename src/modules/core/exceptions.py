"""DRF exception handler for the API boundary.

Domain exceptions are translated by the views themselves.  Whatever
escapes a view ends up here:

- DRF ``APIException`` subclasses (malformed JSON, method not allowed…)
  keep their status code and are rendered in the ``errors`` list shape
  used by validation failures.
- Anything else is an internal failure: it is logged with its traceback,
  the surrounding atomic block is marked for rollback and the client gets
  a generic 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        detail = data.get("detail", data) if isinstance(data, dict) else data
        response.data = {"errors": [{"type": "request", "msg": str(detail)}]}
        return response

    view = context.get("view")
    request = context.get("request")
    logger.error(
        "unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        method=getattr(request, "method", None),
        path=request.get_full_path() if request is not None else None,
        error=str(exc),
        exc_info=exc,
    )
    set_rollback()
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
