"""Product hierarchy.

A product is one of a closed set of kinds (book, electronics, clothing).
Each kind carries a fixed discount rate as data; the variants only add
their own descriptive attribute and the validation that goes with it.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

import structlog

from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.value_objects import DiscountRate, Money

logger = structlog.get_logger(__name__)

MAX_SIZE_CODE_LENGTH = 8


class ProductKind(Enum):
    BOOK = "book"
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"

    @property
    def discount_rate(self) -> DiscountRate:
        return _DISCOUNT_RATES[self]


_DISCOUNT_RATES = {
    ProductKind.BOOK: DiscountRate(Decimal("0.10")),
    ProductKind.ELECTRONICS: DiscountRate(Decimal("0.15")),
    ProductKind.CLOTHING: DiscountRate(Decimal("0.05")),
}


def _as_money(value: Money | str | int | Decimal) -> Money:
    if isinstance(value, Money):
        return value
    return Money.of(value)


def _check_non_negative_int(value: int, label: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")


def _check_size_code(value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Clothing size is required")
    if len(value.strip()) > MAX_SIZE_CODE_LENGTH:
        raise ValidationError(
            f"Clothing size must be at most {MAX_SIZE_CODE_LENGTH} characters"
        )


@dataclass
class Product(ABC):
    """Base for every priced product.

    Invariants:
    - ``name`` is never empty or whitespace-only
    - ``price`` is always a finite, non-negative ``Money``

    Every field assignment, the ones made by ``__init__`` included, goes
    through ``_coerce``.  Construction either fully succeeds or raises
    ``ValidationError``, and a rejected assignment keeps the old value.
    """

    name: str
    price: Money

    kind: ClassVar[ProductKind]

    def __setattr__(self, field_name: str, value: Any) -> None:
        super().__setattr__(field_name, self._coerce(field_name, value))

    def _coerce(self, field_name: str, value: Any) -> Any:
        """Validate *value* for *field_name* and return what gets stored."""
        if field_name == "name":
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("Product name is required")
            return value.strip()
        if field_name == "price":
            return _as_money(value)
        return value

    @property
    def discount_rate(self) -> DiscountRate:
        return self.kind.discount_rate

    def calculate_discount(self) -> Money:
        return self.price * self.discount_rate

    def calculate_total_cost(self) -> Money:
        """Price after the kind's discount has been taken off."""
        return self.price - self.calculate_discount()

    def update_price(self, new_price: Money | str | int | Decimal) -> None:
        """Change the price in place.

        The new value is validated before anything is assigned, so a
        rejected update leaves the current price untouched.
        """
        price = _as_money(new_price)
        logger.debug(
            "product_price_updated",
            product=self.name,
            old_price=str(self.price),
            new_price=str(price),
        )
        self.price = price

    def with_price(self, new_price: Money | str | int | Decimal) -> Product:
        """Return a copy with a different price; this product is not changed."""
        return dataclasses.replace(self, price=new_price)

    @abstractmethod
    def describe(self) -> str:
        """Human-readable summary of the kind-specific attribute."""


@dataclass
class Book(Product):
    page_count: int

    kind: ClassVar[ProductKind] = ProductKind.BOOK

    def _coerce(self, field_name: str, value: Any) -> Any:
        if field_name == "page_count":
            _check_non_negative_int(value, "Page count")
        return super()._coerce(field_name, value)

    def update_page_count(self, page_count: int) -> None:
        self.page_count = page_count

    def describe(self) -> str:
        return f"{self.page_count} pages"


@dataclass
class Electronics(Product):
    memory_size: int  # GB

    kind: ClassVar[ProductKind] = ProductKind.ELECTRONICS

    def _coerce(self, field_name: str, value: Any) -> Any:
        if field_name == "memory_size":
            _check_non_negative_int(value, "Memory size")
        return super()._coerce(field_name, value)

    def update_memory_size(self, memory_size: int) -> None:
        self.memory_size = memory_size

    def describe(self) -> str:
        return f"{self.memory_size} GB"


@dataclass
class Clothing(Product):
    size: str

    kind: ClassVar[ProductKind] = ProductKind.CLOTHING

    def _coerce(self, field_name: str, value: Any) -> Any:
        if field_name == "size":
            _check_size_code(value)
            return value.strip()
        return super()._coerce(field_name, value)

    def update_size(self, size: str) -> None:
        self.size = size

    def describe(self) -> str:
        return f"size {self.size}"
