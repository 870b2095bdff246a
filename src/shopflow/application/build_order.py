"""Application service: Build Order use case."""

from __future__ import annotations

from shopflow.application.dto import ProductSpec
from shopflow.application.product_factory import create_product
from shopflow.domain.model.order import Order


class BuildOrderHandler:

    def handle(self, order_number: int, product_specs: list[ProductSpec]) -> Order:
        """Build an order holding every requested product, in order.

        All products are built before the order is assembled, so an
        invalid spec never leaves a half-filled order behind.
        """
        products = [create_product(spec) for spec in product_specs]

        order = Order(order_number=order_number)
        for product in products:
            order.add_product(product)
        return order
