# apps/common/handlers.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import (
    EngineError,
    NOT_FOUND,
    INVARIANT_VIOLATION,
    PRECONDITION_FAILED,
    TRANSACTION_CONFLICT,
)

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    INVARIANT_VIOLATION: status.HTTP_409_CONFLICT,
    PRECONDITION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TRANSACTION_CONFLICT: status.HTTP_409_CONFLICT,
}


def engine_exception_handler(exc, context):
    """Render engine errors as structured JSON, defer everything else to DRF."""
    if isinstance(exc, EngineError):
        view = context.get('view')
        logger.info(
            f"{exc.code} rejected in {view.__class__.__name__ if view else 'unknown view'}: {exc}"
        )
        response = Response(
            {'error': exc.as_dict()},
            status=STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        )
        if exc.retryable:
            response['Retry-After'] = '1'
        return response

    return exception_handler(exc, context)
