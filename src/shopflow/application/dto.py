"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopflow.domain.model.product import ProductKind


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product to build (kind, name, raw price and kind attribute)."""

    kind: ProductKind
    name: str
    price: str
    attribute: int | str  # page count, memory size (GB) or size code


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    kind: str
    name: str
    details: str
    price: str  # formatted, e.g. "$250.00"
    discount_rate: str  # e.g. "10%"
    discount: str
    total_cost: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    order_number: int
    products: list[ProductDTO]
    total_cost: str
