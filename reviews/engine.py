import structlog

from .directory import TeamDirectory
from .ledger import PullRequestLedger

logger = structlog.get_logger(__name__)


class ReviewAssignmentEngine:
    """
    Создание, мерж и переназначение ревьюверов PR.
    Своего состояния не хранит: читает команду из TeamDirectory, пишет через PullRequestLedger.
    """

    REVIEWERS_PER_PULL_REQUEST = 2

    def __init__(self, directory: TeamDirectory, ledger: PullRequestLedger):
        self.directory = directory
        self.ledger = ledger

    def create_pull_request(self, pr_id: str, pr_name: str, author_id: str):
        # Ревьюверы из команды автора; их может оказаться меньше двух
        team_id = self.directory.team_of(author_id)
        reviewer_ids = self.directory.sample_reviewers(team_id, author_id, self.REVIEWERS_PER_PULL_REQUEST)
        if len(reviewer_ids) < self.REVIEWERS_PER_PULL_REQUEST:
            logger.info('not_enough_reviewers', pr_id=pr_id, team_id=team_id, assigned=len(reviewer_ids))
        return self.ledger.create(pr_id, pr_name, author_id, reviewer_ids)

    def merge_pull_request(self, pr_id: str):
        return self.ledger.merge(pr_id)

    def reassign_reviewer(self, pr_id: str, old_reviewer_id: str) -> tuple:
        """
        Заменяет ревьювера случайным активным участником его же команды.

        Returns:
            tuple: (PR, id нового ревьювера)
        """
        pr = self.ledger.get(pr_id)
        self.ledger.ensure_reassignable(pr, old_reviewer_id)

        # Кандидаты берутся из команды ревьювера, а не автора
        team_id = self.directory.team_of(old_reviewer_id)
        new_reviewer_id = self.directory.sample_replacement(team_id, {old_reviewer_id, pr.author_id})

        pr = self.ledger.reassign(pr_id, old_reviewer_id, new_reviewer_id)
        return pr, new_reviewer_id


def build_engine(sampler=None) -> ReviewAssignmentEngine:
    return ReviewAssignmentEngine(TeamDirectory(sampler=sampler), PullRequestLedger())
