"""Tests for building orders from product specs and displaying them."""

import pytest

from shopflow.application.build_order import BuildOrderHandler
from shopflow.application.dto import ProductSpec
from shopflow.application.product_factory import create_product
from shopflow.application.show_order import ShowOrderHandler
from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.product import Book, Clothing, Electronics, ProductKind
from shopflow.domain.model.value_objects import Money


def _specs() -> list[ProductSpec]:
    return [
        ProductSpec(ProductKind.BOOK, "Intro", "250.00", 400),
        ProductSpec(ProductKind.ELECTRONICS, "Laptop", "15000.00", "256"),
        ProductSpec(ProductKind.CLOTHING, "Shirt", "300.00", "M"),
    ]


class TestCreateProduct:

    def test_builds_each_kind(self):
        book, laptop, shirt = (create_product(s) for s in _specs())
        assert isinstance(book, Book) and book.page_count == 400
        assert isinstance(laptop, Electronics) and laptop.memory_size == 256
        assert isinstance(shirt, Clothing) and shirt.size == "M"

    def test_price_is_parsed(self):
        assert create_product(_specs()[0]).price == Money.of("250.00")

    def test_non_numeric_attribute_rejected(self):
        spec = ProductSpec(ProductKind.BOOK, "Intro", "250.00", "many")
        with pytest.raises(ValidationError, match="Page count for 'Intro' must be an integer"):
            create_product(spec)

    def test_float_attribute_rejected(self):
        spec = ProductSpec(ProductKind.ELECTRONICS, "Laptop", "10", 4.7)
        with pytest.raises(ValidationError, match="Memory size for 'Laptop' must be an integer"):
            create_product(spec)

    def test_bool_attribute_rejected(self):
        spec = ProductSpec(ProductKind.BOOK, "Intro", "10", True)
        with pytest.raises(ValidationError, match="Page count for 'Intro' must be an integer"):
            create_product(spec)

    def test_non_text_size_rejected(self):
        spec = ProductSpec(ProductKind.CLOTHING, "Shirt", "10", 42)
        with pytest.raises(ValidationError, match="Clothing size for 'Shirt' must be text"):
            create_product(spec)

    def test_infinite_price_rejected(self):
        spec = ProductSpec(ProductKind.BOOK, "Intro", "inf", 400)
        with pytest.raises(ValidationError, match="must be finite"):
            create_product(spec)

    def test_unknown_kind_rejected(self):
        spec = ProductSpec("furniture", "Chair", "10", 1)
        with pytest.raises(ValidationError, match="Unsupported product kind"):
            create_product(spec)


class TestBuildOrder:

    def test_builds_order_in_spec_order(self):
        order = BuildOrderHandler().handle(1, _specs())
        assert order.order_number == 1
        assert [p.name for p in order.products] == ["Intro", "Laptop", "Shirt"]
        assert order.total_cost == Money.of("13260.00")

    def test_empty_spec_list_gives_empty_order(self):
        order = BuildOrderHandler().handle(2, [])
        assert order.total_cost == Money.zero()

    def test_invalid_spec_rejected(self):
        specs = _specs() + [ProductSpec(ProductKind.CLOTHING, "", "10", "S")]
        with pytest.raises(ValidationError, match="name is required"):
            BuildOrderHandler().handle(1, specs)

    def test_negative_price_rejected(self):
        specs = [ProductSpec(ProductKind.BOOK, "Intro", "-250", 400)]
        with pytest.raises(ValidationError, match="cannot be negative"):
            BuildOrderHandler().handle(1, specs)


class TestShowOrder:

    def test_order_dto(self):
        order = BuildOrderHandler().handle(1, _specs())
        dto = ShowOrderHandler().handle(order)

        assert dto.order_number == 1
        assert dto.total_cost == "$13260.00"
        assert len(dto.products) == 3

        book = dto.products[0]
        assert book.kind == "book"
        assert book.details == "400 pages"
        assert book.price == "$250.00"
        assert book.discount_rate == "10%"
        assert book.discount == "$25.00"
        assert book.total_cost == "$225.00"

    def test_electronics_line(self):
        order = BuildOrderHandler().handle(1, _specs())
        laptop = ShowOrderHandler().handle(order).products[1]
        assert laptop.details == "256 GB"
        assert laptop.discount == "$2250.00"
        assert laptop.total_cost == "$12750.00"
