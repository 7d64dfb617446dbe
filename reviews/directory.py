import structlog

from .errors import Entity, ConflictKind, ConflictError, NotFoundError, storage_errors
from .models import User
from .sampling import RandomSampler, Sampler

logger = structlog.get_logger(__name__)


class TeamDirectory:
    """
    Запросы к составу команд и флагам активности. Ничего не изменяет.
    """

    def __init__(self, sampler: Sampler = None):
        self.sampler = sampler or RandomSampler()

    def team_of(self, user_id: str) -> int:
        with storage_errors('team_of', user_id=user_id):
            try:
                user = User.objects.only('team').get(id=user_id)
            except User.DoesNotExist:
                raise NotFoundError(Entity.USER, user_id)

        if user.team_id is None:
            raise NotFoundError(Entity.TEAM, user_id)
        return user.team_id

    def _eligible(self, team_id: int, exclude_ids) -> list:
        # Активность и исключения проверяются одним запросом
        with storage_errors('eligible_members', team_id=team_id):
            return list(
                User.objects
                .filter(team_id=team_id, is_active=True)
                .exclude(id__in=list(exclude_ids))
                .order_by('id')
                .values_list('id', flat=True)
            )

    def sample_reviewers(self, team_id: int, exclude_user_id: str, count: int) -> list:
        """
        До count различных активных участников команды, кроме exclude_user_id.
        Нехватка кандидатов ошибкой не является.
        """
        candidates = self._eligible(team_id, [exclude_user_id])
        reviewers = self.sampler.sample(candidates, min(count, len(candidates)))

        logger.debug('reviewers_sampled', team_id=team_id, candidates=len(candidates), reviewers=reviewers)
        return list(reviewers)

    def sample_replacement(self, team_id: int, exclude_user_ids) -> str:
        candidates = self._eligible(team_id, exclude_user_ids)
        if not candidates:
            raise ConflictError(ConflictKind.NO_CANDIDATE)

        (candidate,) = self.sampler.sample(candidates, 1)
        logger.debug('replacement_sampled', team_id=team_id, candidate=candidate)
        return candidate
