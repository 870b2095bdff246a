"""Reporter that turns each message into a structured log event."""

from __future__ import annotations

import structlog

from shopflow.domain.reporting.reporter import Reporter


class LogReporter(Reporter):

    def __init__(self, logger_name: str = "shopflow.report") -> None:
        self._logger = structlog.get_logger(logger_name)

    def write(self, message: str) -> None:
        self._logger.info("report", message=message)
