"""Reporter that prints each message to stdout."""

from __future__ import annotations

import click

from shopflow.domain.reporting.reporter import Reporter


class ConsoleReporter(Reporter):

    def write(self, message: str) -> None:
        click.echo(message)
