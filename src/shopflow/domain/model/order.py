"""Order aggregate — the core of the domain.

The Order owns an ordered list of products and a list of status
listeners.  It never stores a "current status": a status change is an
event that is handed to every listener and then forgotten.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import structlog

from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.product import Product
from shopflow.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)

StatusListener = Callable[[str], None]


@dataclass
class Order:
    """Aggregate root for a customer order.

    Listeners are called synchronously, in registration order, inside
    ``change_status``.  The order keeps the registration only; it does
    not own the listeners themselves.
    """

    order_number: int
    products: list[Product] = field(default_factory=list)
    _listeners: list[StatusListener] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.order_number, int) or isinstance(self.order_number, bool):
            raise ValidationError(
                f"Order number must be an integer, got {type(self.order_number).__name__}"
            )
        self.products = list(self.products)

    # --- Products -------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Append a product; duplicates are allowed."""
        self.products.append(product)
        logger.debug(
            "product_added",
            order_number=self.order_number,
            product=product.name,
            kind=product.kind.value,
        )

    @property
    def product_count(self) -> int:
        return len(self.products)

    # --- Computed properties --------------------------------------------------

    @property
    def total_cost(self) -> Money:
        result = Money.zero()
        for product in self.products:
            result = result + product.calculate_total_cost()
        return result

    # --- Status notifications -------------------------------------------------

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StatusListener) -> None:
        """Remove the earliest registration of *listener*, if any."""
        for index, registered in enumerate(self._listeners):
            if registered == listener:
                del self._listeners[index]
                return

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def change_status(self, status: str) -> None:
        """Deliver *status* to every listener registered at call time.

        Exceptions raised by a listener propagate to the caller and stop
        delivery to the listeners after it.
        """
        listeners = list(self._listeners)
        logger.info(
            "order_status_changed",
            order_number=self.order_number,
            status=status,
            listeners=len(listeners),
        )
        for listener in listeners:
            listener(status)
