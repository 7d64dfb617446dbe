from django.db import IntegrityError
from django.test import TestCase
from django.utils import timezone
from reviews.models import Team, User, PullRequest


class TeamModelTest(TestCase):
    def test_create_team(self):
        """Тест создания команды"""
        team = Team.objects.create(name="backend")
        self.assertEqual(team.name, "backend")
        self.assertEqual(str(team), "backend")

    def test_team_unique_name(self):
        """Тест уникальности имени команды"""
        Team.objects.create(name="backend")
        with self.assertRaises(IntegrityError):
            Team.objects.create(name="backend")


class UserModelTest(TestCase):
    def setUp(self):
        self.team = Team.objects.create(name="backend")
        self.user = User.objects.create(
            id="user1",
            username="John Doe",
            is_active=True,
            team=self.team
        )

    def test_create_user(self):
        """Тест создания пользователя"""
        self.assertEqual(self.user.id, "user1")
        self.assertEqual(self.user.username, "John Doe")
        self.assertTrue(self.user.is_active)
        self.assertEqual(str(self.user), "John Doe (user1)")

    def test_user_team_relationship(self):
        """Пользователь состоит не более чем в одной команде"""
        other = Team.objects.create(name="frontend")
        self.user.team = other
        self.user.save()

        self.assertEqual(self.team.members.count(), 0)
        self.assertIn(self.user, other.members.all())

    def test_team_deletion_keeps_user(self):
        self.team.delete()
        self.user.refresh_from_db()

        self.assertIsNone(self.user.team)


class PullRequestModelTest(TestCase):
    def setUp(self):
        self.team = Team.objects.create(name="backend")
        self.author = User.objects.create(id="author1", username="Author", team=self.team)
        self.reviewer1 = User.objects.create(id="reviewer1", username="Reviewer 1", team=self.team)
        self.reviewer2 = User.objects.create(id="reviewer2", username="Reviewer 2", team=self.team)

    def test_create_pull_request(self):
        """Тест создания PR"""
        pr = PullRequest.objects.create(
            id="pr-1",
            name="Test PR",
            author=self.author
        )
        pr.reviewers.add(self.reviewer2, self.reviewer1)

        self.assertEqual(pr.status, PullRequest.Status.OPEN)
        self.assertFalse(pr.is_merged)
        self.assertEqual(pr.reviewer_ids(), ["reviewer1", "reviewer2"])

    def test_reviewers_are_distinct(self):
        pr = PullRequest.objects.create(id="pr-1", name="Test PR", author=self.author)
        pr.reviewers.add(self.reviewer1)
        pr.reviewers.add(self.reviewer1)

        self.assertEqual(pr.reviewers.count(), 1)

    def test_pr_merge_sets_merged_at(self):
        """Тест что мерж автоматически устанавливает merged_at"""
        pr = PullRequest.objects.create(
            id="pr-1",
            name="Test PR",
            author=self.author
        )

        self.assertIsNone(pr.merged_at)

        pr.status = PullRequest.Status.MERGED
        pr.save()

        pr.refresh_from_db()
        self.assertTrue(pr.is_merged)
        self.assertIsNotNone(pr.merged_at)
        self.assertTrue(pr.merged_at <= timezone.now())

    def test_pr_string_representation(self):
        """Тест строкового представления PR"""
        pr = PullRequest.objects.create(
            id="pr-1",
            name="Test PR",
            author=self.author
        )
        self.assertEqual(str(pr), "Test PR (pr-1)")
