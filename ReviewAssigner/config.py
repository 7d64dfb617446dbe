"""Конфигурация сервиса назначения ревьюверов.

Значения читаются из переменных окружения и, если есть, из файла ``.env``
в рабочем каталоге (или файла из ``REVIEW_ASSIGNER_ENV_FILE``).
У каждой секции свой префикс:

    DB_ENGINE=postgresql
    DB_HOST=localhost
    DB_NAME=reviews
    SERVICE_DEBUG=false
    LOG_LEVEL=DEBUG
    LOG_FORMAT=console
"""

from __future__ import annotations

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = os.environ.get("REVIEW_ASSIGNER_ENV_FILE", ".env")


class DatabaseConfig(BaseSettings):
    """Подключение к базе данных.

    Attributes:
        engine: ``sqlite`` (локальный файл) или ``postgresql``
        host: Хост сервера БД (только postgresql)
        port: Порт сервера БД (только postgresql)
        user: Пользователь БД (только postgresql)
        password: Пароль БД (только postgresql)
        name: Имя базы, для sqlite - путь к файлу
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=ENV_FILE,
        extra="ignore",
    )

    engine: str = Field(default="sqlite")
    host: str = Field(default="localhost")
    port: int = Field(default=5432, ge=1, le=65535)
    user: str = Field(default="postgres")
    password: str = Field(default="")
    name: str = Field(default="db.sqlite3")

    @field_validator("engine")
    @classmethod
    def validate_engine(cls, v: str) -> str:
        """Проверка, что движок БД поддерживается"""
        valid_engines = {"sqlite", "postgresql"}
        v_lower = v.lower()
        if v_lower not in valid_engines:
            raise ValueError(f"Invalid database engine: {v}. Must be one of {valid_engines}")
        return v_lower

    def django_settings(self) -> dict:
        """Запись DATABASES["default"] для Django"""
        if self.engine == "sqlite":
            return {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": self.name,
            }
        return {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": self.host,
            "PORT": self.port,
            "USER": self.user,
            "PASSWORD": self.password,
            "NAME": self.name,
        }


class ServiceConfig(BaseSettings):
    """Настройки HTTP-сервиса"""

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_",
        env_file=ENV_FILE,
        extra="ignore",
    )

    debug: bool = Field(default=False)
    secret_key: str = Field(default="insecure-review-assigner-key")
    allowed_hosts: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseSettings):
    """Настройки логирования.

    Attributes:
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Формат вывода (json или console)
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=ENV_FILE,
        extra="ignore",
    )

    level: str = Field(default="INFO")
    format: str = Field(default="json")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Проверка уровня логирования"""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Проверка формата логов"""
        valid_formats = {"json", "console"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v_lower


class AppConfig(BaseSettings):
    """Корневая конфигурация со всеми секциями"""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config() -> AppConfig:
    """Загружает конфигурацию из окружения.

    Raises:
        ValueError: если какая-то переменная содержит недопустимое значение
    """
    try:
        return AppConfig()
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
