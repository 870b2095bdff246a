"""Application service: status notifications."""

from __future__ import annotations

from shopflow.domain.model.order import Order
from shopflow.domain.reporting.reporter import Reporter


class NotificationService:

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def send_notification(self, status: str) -> None:
        self._reporter.write(f"Notification: {status}")

    def subscribe_to(self, order: Order) -> None:
        """Register this service as a status listener on *order*."""
        order.subscribe(self.send_notification)
