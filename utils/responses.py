import logging

from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def error_response(exc):
    """JSON error payload for an EcoPilotError."""
    payload = {'error': exc.message}
    errors = getattr(exc, 'errors', None)
    if errors:
        payload['details'] = errors
    return Response(payload, status=exc.status_code)


def unexpected_error_response(action, exc):
    logger.error(f"Unexpected error while {action}: {exc}", exc_info=True)
    return Response({
        'error': f'An error occurred while {action}',
        'message': str(exc)
    }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
