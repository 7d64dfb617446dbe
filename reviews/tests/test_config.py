from django.test import SimpleTestCase
from pydantic import ValidationError

from ReviewAssigner.config import DatabaseConfig, LoggingConfig


class ConfigTest(SimpleTestCase):
    def test_logging_level_normalized(self):
        config = LoggingConfig(level="debug", format="CONSOLE")

        self.assertEqual(config.level, "DEBUG")
        self.assertEqual(config.format, "console")

    def test_logging_invalid_values(self):
        with self.assertRaises(ValidationError):
            LoggingConfig(level="loud")
        with self.assertRaises(ValidationError):
            LoggingConfig(format="xml")

    def test_sqlite_database(self):
        config = DatabaseConfig(engine="sqlite", name="reviews.sqlite3")

        self.assertEqual(config.django_settings(), {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": "reviews.sqlite3",
        })

    def test_postgresql_database(self):
        config = DatabaseConfig(
            engine="PostgreSQL", host="db", port=6432, user="svc", password="secret", name="reviews",
        )

        settings = config.django_settings()
        self.assertEqual(settings["ENGINE"], "django.db.backends.postgresql")
        self.assertEqual(settings["HOST"], "db")
        self.assertEqual(settings["PORT"], 6432)
        self.assertEqual(settings["NAME"], "reviews")

    def test_invalid_engine(self):
        with self.assertRaises(ValidationError):
            DatabaseConfig(engine="oracle")
