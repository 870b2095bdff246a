"""Builds concrete products from a ProductSpec.

Dispatch is over the closed set of ``ProductKind`` members; adding a
kind without a builder here fails loudly instead of silently.
"""

from __future__ import annotations

from typing import Callable

from shopflow.application.dto import ProductSpec
from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.product import (
    Book,
    Clothing,
    Electronics,
    Product,
    ProductKind,
)
from shopflow.domain.model.value_objects import Money


def _int_attribute(spec: ProductSpec, label: str) -> int:
    if isinstance(spec.attribute, int) and not isinstance(spec.attribute, bool):
        return spec.attribute
    if not isinstance(spec.attribute, str):
        raise ValidationError(
            f"{label} for '{spec.name}' must be an integer, got {spec.attribute!r}"
        )
    try:
        return int(spec.attribute)
    except ValueError:
        raise ValidationError(
            f"{label} for '{spec.name}' must be an integer, got {spec.attribute!r}"
        )


def _book(spec: ProductSpec) -> Product:
    return Book(spec.name, Money.of(spec.price), _int_attribute(spec, "Page count"))


def _electronics(spec: ProductSpec) -> Product:
    return Electronics(
        spec.name, Money.of(spec.price), _int_attribute(spec, "Memory size")
    )


def _clothing(spec: ProductSpec) -> Product:
    if not isinstance(spec.attribute, str):
        raise ValidationError(
            f"Clothing size for '{spec.name}' must be text, got {spec.attribute!r}"
        )
    return Clothing(spec.name, Money.of(spec.price), spec.attribute)


_BUILDERS: dict[ProductKind, Callable[[ProductSpec], Product]] = {
    ProductKind.BOOK: _book,
    ProductKind.ELECTRONICS: _electronics,
    ProductKind.CLOTHING: _clothing,
}


def create_product(spec: ProductSpec) -> Product:
    """Build the product described by *spec*, validating every field."""
    try:
        builder = _BUILDERS[spec.kind]
    except KeyError:
        raise ValidationError(f"Unsupported product kind: {spec.kind!r}")
    return builder(spec)
