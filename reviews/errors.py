"""
Ошибки ядра назначения ревьюверов.

Вызывающий код ветвится по ``kind`` / ``entity``, текст сообщения только для людей.
"""
from contextlib import contextmanager

import structlog
from django.db import DatabaseError, models

logger = structlog.get_logger(__name__)


class Entity(models.TextChoices):
    USER = 'user', 'User'
    TEAM = 'team', 'Team'
    PULL_REQUEST = 'pull_request', 'PR'


class ConflictKind(models.TextChoices):
    ALREADY_EXISTS = 'PR_EXISTS', 'PR id already exists'
    NO_CANDIDATE = 'NO_CANDIDATE', 'no active replacement candidate in team'
    ALREADY_MERGED = 'PR_MERGED', 'cannot reassign on merged PR'
    NOT_ASSIGNED = 'NOT_ASSIGNED', 'reviewer is not assigned to this PR'
    TEAM_EXISTS = 'TEAM_EXISTS', 'team_name already exists'


class ReviewError(Exception):
    code = 'SERVER_ERROR'


class NotFoundError(ReviewError):
    code = 'NOT_FOUND'

    def __init__(self, entity: Entity, identifier=None):
        self.entity = Entity(entity)
        self.identifier = identifier
        message = f"{self.entity.label} not found"
        if identifier is not None:
            message = f"{self.entity.label} '{identifier}' not found"
        super().__init__(message)


class ConflictError(ReviewError):
    def __init__(self, kind: ConflictKind, message: str = None):
        self.kind = ConflictKind(kind)
        super().__init__(message or self.kind.label)

    @property
    def code(self):
        return self.kind.value


class InternalError(ReviewError):
    """Непредвиденный сбой хранилища, вызывающий может повторить запрос"""


@contextmanager
def storage_errors(operation: str, **context):
    """
    Превращает ошибки БД внутри блока в InternalError.
    Открывать снаружи transaction.atomic(), чтобы откат прошел до преобразования.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.error('storage_failure', operation=operation, error=str(exc), **context)
        raise InternalError(f"{operation} failed") from exc
