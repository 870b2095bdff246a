import click
from pydantic import ValidationError as SettingsError

from shopflow.infrastructure.bootstrap import init_logging
from shopflow.infrastructure.cli.order_commands import demo, order_process


@click.group()
def cli() -> None:
    """shopflow: discounted products, orders and status notifications"""
    try:
        init_logging()
    except SettingsError as exc:
        fields = ", ".join(
            f"SHOPFLOW_{'_'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration ({fields})")


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
cli.add_command(demo)
order.add_command(order_process)
