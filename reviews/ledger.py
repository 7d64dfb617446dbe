import structlog
from django.db import IntegrityError, transaction
from django.utils import timezone

from .errors import Entity, ConflictKind, ConflictError, NotFoundError, storage_errors
from .models import PullRequest, User

logger = structlog.get_logger(__name__)


class PullRequestLedger:
    """
    Хранилище Pull Request'ов и назначенных ревьюверов.
    Единственное место, где PR создаются и изменяются; каждая операция - одна транзакция.
    """

    def get(self, pr_id: str) -> PullRequest:
        with storage_errors('get_pull_request', pr_id=pr_id):
            try:
                return PullRequest.objects.prefetch_related('reviewers').get(id=pr_id)
            except PullRequest.DoesNotExist:
                raise NotFoundError(Entity.PULL_REQUEST, pr_id)

    @staticmethod
    def ensure_reassignable(pr: PullRequest, reviewer_id: str):
        """
        Проверка доменных правил переназначения без блокировок.
        Окончательно они проверяются внутри reassign.
        """
        if pr.is_merged:
            raise ConflictError(ConflictKind.ALREADY_MERGED)
        if reviewer_id not in pr.reviewer_ids():
            raise ConflictError(ConflictKind.NOT_ASSIGNED)

    def create(self, pr_id: str, name: str, author_id: str, reviewer_ids) -> PullRequest:
        """
        Создает PR в статусе OPEN вместе с ревьюверами.

        Raises:
            ConflictError(ALREADY_EXISTS): если PR с таким id уже есть
            NotFoundError: если автора нет
        """
        reviewer_ids = [rid for rid in dict.fromkeys(reviewer_ids) if rid != author_id]

        with storage_errors('create_pull_request', pr_id=pr_id), transaction.atomic():
            if PullRequest.objects.filter(id=pr_id).exists():
                raise ConflictError(ConflictKind.ALREADY_EXISTS)
            if not User.objects.filter(id=author_id).exists():
                raise NotFoundError(Entity.USER, author_id)

            # Параллельный create мог успеть между проверкой и вставкой,
            # первичный ключ это поймает
            try:
                with transaction.atomic():
                    pr = PullRequest.objects.create(id=pr_id, name=name, author_id=author_id)
            except IntegrityError:
                raise ConflictError(ConflictKind.ALREADY_EXISTS)

            pr.reviewers.set(reviewer_ids)

        logger.info('pull_request_created', pr_id=pr_id, author_id=author_id, reviewers=reviewer_ids)
        return pr

    def merge(self, pr_id: str) -> PullRequest:
        """
        Переводит PR в MERGED. Повторный вызов ничего не меняет и возвращает тот же PR.
        """
        with storage_errors('merge_pull_request', pr_id=pr_id), transaction.atomic():
            # Условный UPDATE: переход выполняет ровно один из параллельных вызовов
            transitioned = PullRequest.objects.filter(
                id=pr_id,
                status=PullRequest.Status.OPEN,
            ).update(status=PullRequest.Status.MERGED, merged_at=timezone.now())

            try:
                pr = PullRequest.objects.prefetch_related('reviewers').get(id=pr_id)
            except PullRequest.DoesNotExist:
                raise NotFoundError(Entity.PULL_REQUEST, pr_id)

        if transitioned:
            logger.info('pull_request_merged', pr_id=pr_id, merged_at=pr.merged_at.isoformat())
        else:
            logger.info('pull_request_already_merged', pr_id=pr_id)
        return pr

    def reassign(self, pr_id: str, old_reviewer_id: str, new_reviewer_id: str) -> PullRequest:
        """
        Заменяет old_reviewer_id на new_reviewer_id в открытом PR.

        Raises:
            NotFoundError: PR не найден
            ConflictError(ALREADY_MERGED): PR уже смержен
            ConflictError(NOT_ASSIGNED): old_reviewer_id не назначен на PR
        """
        Reviewers = PullRequest.reviewers.through

        with storage_errors('reassign_reviewer', pr_id=pr_id), transaction.atomic():
            try:
                pr = PullRequest.objects.select_for_update().get(id=pr_id)
            except PullRequest.DoesNotExist:
                raise NotFoundError(Entity.PULL_REQUEST, pr_id)

            if pr.is_merged:
                raise ConflictError(ConflictKind.ALREADY_MERGED)
            if new_reviewer_id == pr.author_id:
                raise ValueError(f"author '{pr.author_id}' cannot review own PR '{pr_id}'")

            # Число удаленных строк и есть проверка назначения:
            # из двух параллельных вызовов строку удалит только один
            removed, _ = Reviewers.objects.filter(pullrequest_id=pr.id, user_id=old_reviewer_id).delete()
            if not removed:
                raise ConflictError(ConflictKind.NOT_ASSIGNED)

            pr.reviewers.add(new_reviewer_id)

        logger.info('reviewer_reassigned', pr_id=pr_id, old_reviewer_id=old_reviewer_id,
                    new_reviewer_id=new_reviewer_id)
        return pr
