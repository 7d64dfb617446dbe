import structlog
from django.db import IntegrityError, transaction

from .errors import Entity, ConflictKind, ConflictError, NotFoundError, storage_errors
from .models import Team, User, PullRequest

logger = structlog.get_logger(__name__)


class TeamService:
    """
    Сервис для управления командами и пользователями
    """

    @classmethod
    def create_team_with_members(cls, team_name: str, members_data: list) -> Team:
        """
        Создает команду с пользователями.
        Существующие пользователи обновляются и переходят в новую команду.

        Raises:
            ConflictError(TEAM_EXISTS): если команда уже существует
        """
        with storage_errors('create_team', team_name=team_name), transaction.atomic():
            if Team.objects.filter(name=team_name).exists():
                raise ConflictError(ConflictKind.TEAM_EXISTS)

            try:
                with transaction.atomic():
                    team = Team.objects.create(name=team_name)
            except IntegrityError:
                raise ConflictError(ConflictKind.TEAM_EXISTS)

            for member_data in members_data:
                cls._create_or_update_user(team, member_data)

        logger.info('team_created', team_name=team_name, members=len(members_data))
        return team

    @classmethod
    def _create_or_update_user(cls, team: Team, member_data: dict) -> User:
        user, created = User.objects.update_or_create(
            id=member_data['user_id'],
            defaults={
                'username': member_data['username'],
                'is_active': member_data['is_active'],
                'team': team,
            },
        )
        return user

    @classmethod
    def get_team_with_members(cls, team_name: str) -> Team:
        with storage_errors('get_team', team_name=team_name):
            try:
                return Team.objects.prefetch_related('members').get(name=team_name)
            except Team.DoesNotExist:
                raise NotFoundError(Entity.TEAM, team_name)


class UserService:
    """
    Сервис для управления пользователями
    """

    @classmethod
    def set_user_active_status(cls, user_id: str, is_active: bool) -> User:
        with storage_errors('set_user_active', user_id=user_id), transaction.atomic():
            updated = User.objects.filter(id=user_id).update(is_active=is_active)
            if not updated:
                raise NotFoundError(Entity.USER, user_id)
            user = User.objects.select_related('team').get(id=user_id)

        logger.info('user_activity_changed', user_id=user_id, is_active=is_active)
        return user

    @classmethod
    def get_user_review_assignments(cls, user_id: str) -> list:
        with storage_errors('get_user_reviews', user_id=user_id):
            if not User.objects.filter(id=user_id).exists():
                raise NotFoundError(Entity.USER, user_id)
            return list(
                PullRequest.objects
                .filter(reviewers__id=user_id)
                .select_related('author')
                .order_by('-created_at')
            )
