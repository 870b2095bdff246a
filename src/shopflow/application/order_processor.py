"""Application service: Process Order use case.

Reports the order's total to the output collaborator and then emits
the configured "processed" status through the order's listeners.
"""

from __future__ import annotations

import structlog

from shopflow.domain.model.order import Order
from shopflow.domain.reporting.reporter import Reporter

logger = structlog.get_logger(__name__)

DEFAULT_PROCESSED_STATUS = "Order processed"


class OrderProcessor:

    def __init__(
        self,
        reporter: Reporter,
        processed_status: str = DEFAULT_PROCESSED_STATUS,
    ) -> None:
        self._reporter = reporter
        self._processed_status = processed_status

    @property
    def processed_status(self) -> str:
        return self._processed_status

    def process_order(self, order: Order) -> None:
        """Report the order total, then announce the status change.

        A failing reporter propagates before any listener is notified.
        """
        total = order.total_cost
        self._reporter.write(f"Order #{order.order_number}: total cost {total}")
        logger.info(
            "order_processed",
            order_number=order.order_number,
            total_cost=str(total),
            products=order.product_count,
        )
        order.change_status(self._processed_status)
