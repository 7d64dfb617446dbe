import structlog
from rest_framework import status
from rest_framework.response import Response

from ..errors import ConflictKind, ConflictError, NotFoundError

logger = structlog.get_logger(__name__)

# Остальные конфликты отдаются как 409
CONFLICT_STATUS = {
    ConflictKind.TEAM_EXISTS: status.HTTP_400_BAD_REQUEST,
}


def error_response(code: str, message: str, http_status: int) -> Response:
    return Response({
        'error': {
            'code': code,
            'message': message
        }
    }, status=http_status)


def validation_error(message: str) -> Response:
    return error_response('VALIDATION_ERROR', message, status.HTTP_400_BAD_REQUEST)


def review_error_response(exc) -> Response:
    """Ответ для ошибок из reviews.errors"""
    if isinstance(exc, NotFoundError):
        return error_response(exc.code, str(exc), status.HTTP_404_NOT_FOUND)
    if isinstance(exc, ConflictError):
        http_status = CONFLICT_STATUS.get(exc.kind, status.HTTP_409_CONFLICT)
        return error_response(exc.code, str(exc), http_status)
    return server_error_response()


def server_error_response() -> Response:
    return error_response('SERVER_ERROR', 'Internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR)


def unexpected_error_response(view: str) -> Response:
    # Вызывается из except-блока, traceback попадет в лог
    logger.exception('unexpected_error', view=view)
    return server_error_response()
