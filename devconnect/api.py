"""
Shared response helpers for the API views.
"""
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def format_errors(errors) -> list:
    """
    Flatten DRF serializer errors into a list of ``{param, msg}`` pairs.

    Field order follows the serializer's declaration order.
    """
    formatted = []
    for field, messages in errors.items():
        if isinstance(messages, dict):
            messages = [f"{key}: {value}" for key, value in messages.items()]
        elif not isinstance(messages, (list, tuple)):
            messages = [messages]
        for message in messages:
            formatted.append({'param': field, 'msg': str(message)})
    return formatted


def validation_error_response(errors) -> Response:
    """400 response carrying the flattened validation errors."""
    return Response(
        {'errors': format_errors(errors)},
        status=status.HTTP_400_BAD_REQUEST,
    )


def message_response(msg: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> Response:
    return Response({'msg': msg}, status=status_code)


def server_error_response(exc: Exception) -> HttpResponse:
    """
    Log an unexpected failure and answer with a generic 500.

    Must be called from inside an ``except`` block so the traceback is kept.
    """
    logger.exception("Unhandled error: %s", exc)
    return HttpResponse(
        'Server Error',
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content_type='text/plain',
    )
