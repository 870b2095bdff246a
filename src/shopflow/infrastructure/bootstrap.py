"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopflow.application.notification_service import NotificationService
from shopflow.application.order_processor import OrderProcessor
from shopflow.config import Settings, get_settings
from shopflow.domain.reporting.reporter import Reporter
from shopflow.infrastructure.logging_setup import configure_logging
from shopflow.infrastructure.reporting.console_reporter import ConsoleReporter
from shopflow.infrastructure.reporting.log_reporter import LogReporter


def init_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)


def reporter(settings: Settings | None = None) -> Reporter:
    settings = settings or get_settings()
    if settings.REPORTER == "log":
        return LogReporter()
    return ConsoleReporter()


def order_processor(settings: Settings | None = None) -> OrderProcessor:
    settings = settings or get_settings()
    return OrderProcessor(
        reporter=reporter(settings),
        processed_status=settings.PROCESSED_STATUS,
    )


def notification_service(settings: Settings | None = None) -> NotificationService:
    return NotificationService(reporter=reporter(settings))
