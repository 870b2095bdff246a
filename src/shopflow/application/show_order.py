"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shopflow.application.dto import OrderDTO, ProductDTO
from shopflow.domain.model.order import Order
from shopflow.domain.model.product import Product


class ShowOrderHandler:

    def handle(self, order: Order) -> OrderDTO:
        return OrderDTO(
            order_number=order.order_number,
            products=[self._product_to_dto(p) for p in order.products],
            total_cost=str(order.total_cost),
        )

    @staticmethod
    def _product_to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            kind=product.kind.value,
            name=product.name,
            details=product.describe(),
            price=str(product.price),
            discount_rate=str(product.discount_rate),
            discount=str(product.calculate_discount()),
            total_cost=str(product.calculate_total_cost()),
        )
