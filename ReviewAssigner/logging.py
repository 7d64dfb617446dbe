"""Настройка структурного логирования.

События пишет structlog, обработчик принадлежит stdlib logging,
поэтому логи Django и сервиса попадают в один поток.

Пример:
    >>> from ReviewAssigner.config import LoggingConfig
    >>> from ReviewAssigner.logging import setup_logging, bind_request_context
    >>>
    >>> setup_logging(LoggingConfig(level="DEBUG", format="console"))
    >>> bind_request_context(request_id="7f3c", path="/pullRequest/create")
    >>> structlog.get_logger(__name__).info("pull_request_created", pr_id="pr-1")
"""

from __future__ import annotations

import logging
import sys

import structlog

from ReviewAssigner.config import LoggingConfig


def bind_request_context(**values) -> None:
    """Добавляет пары ключ-значение ко всем записям в текущем контексте"""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def setup_logging(config: LoggingConfig) -> None:
    """Настраивает structlog и корневой логгер stdlib.

    Args:
        config: секция логирования из конфигурации приложения
    """
    log_level = getattr(logging, config.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
