"""CLI commands for orders."""

from __future__ import annotations

import click
import structlog

from shopflow.application.build_order import BuildOrderHandler
from shopflow.application.dto import OrderDTO, ProductSpec
from shopflow.application.show_order import ShowOrderHandler
from shopflow.domain.exceptions import DomainException
from shopflow.domain.model.order import Order
from shopflow.domain.model.product import ProductKind
from shopflow.infrastructure.bootstrap import notification_service, order_processor

logger = structlog.get_logger(__name__)

DEMO_ITEMS = (
    ProductSpec(ProductKind.BOOK, "Intro to C#", "250.00", 400),
    ProductSpec(ProductKind.ELECTRONICS, "Laptop", "15000.00", 256),
    ProductSpec(ProductKind.CLOTHING, "T-shirt", "300.00", "M"),
)


def _parse_item(raw: str) -> ProductSpec:
    """Parse 'book:Intro:250.00:400' into a ProductSpec."""
    if raw.count(":") < 3:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'KIND:NAME:PRICE:ATTRIBUTE'."
        )
    kind_str, rest = raw.split(":", 1)
    name, price, attribute = rest.rsplit(":", 2)
    try:
        kind = ProductKind(kind_str.strip().lower())
    except ValueError:
        choices = ", ".join(k.value for k in ProductKind)
        raise click.BadParameter(
            f"Unknown product kind '{kind_str}'. Expected one of: {choices}."
        )
    return ProductSpec(
        kind=kind, name=name.strip(), price=price.strip(), attribute=attribute.strip()
    )


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.order_number}")
    click.echo()
    click.echo(
        f"  {'Product':<20} {'Kind':<12} {'Details':<12} {'Price':>10} "
        f"{'Disc.':>5} {'Total':>10}"
    )
    click.echo(f"  {'-'*74}")
    for p in dto.products:
        click.echo(
            f"  {p.name:<20} {p.kind:<12} {p.details:<12} {p.price:>10} "
            f"{p.discount_rate:>5} {p.total_cost:>10}"
        )
    click.echo(f"  {'-'*74}")
    click.echo(f"  {'Order Total':<27} {dto.total_cost:>47}")
    click.echo()


def _run(order: Order, quiet: bool) -> None:
    if not quiet:
        _display_order(ShowOrderHandler().handle(order))

    notification_service().subscribe_to(order)
    order_processor().process_order(order)


@click.command("process")
@click.option("--number", "order_number", required=True, type=int, help="Order number.")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Product as 'KIND:NAME:PRICE:ATTRIBUTE' (repeatable).",
)
@click.option("--quiet", is_flag=True, default=False, help="Skip the product table.")
def order_process(order_number: int, items: tuple[str, ...], quiet: bool) -> None:
    """Build an order from the given products and process it."""
    specs = [_parse_item(raw) for raw in items]

    try:
        order = BuildOrderHandler().handle(order_number, specs)
    except DomainException as exc:
        logger.warning("order_rejected", order_number=order_number, error=str(exc))
        raise click.ClickException(str(exc))

    _run(order, quiet)


@click.command("demo")
@click.option("--quiet", is_flag=True, default=False, help="Skip the product table.")
def demo(quiet: bool) -> None:
    """Process a sample order with one book, one laptop and one T-shirt."""
    order = BuildOrderHandler().handle(1, list(DEMO_ITEMS))
    _run(order, quiet)
