"""In-memory fakes for testing.

FakeReporter implements the same abstract interface as the console and
log reporters but keeps every message in a list. No I/O, no side effects.
"""

from __future__ import annotations

from shopflow.domain.reporting.reporter import Reporter


class FakeReporter(Reporter):

    def __init__(self) -> None:
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)


class FailingReporter(Reporter):

    def write(self, message: str) -> None:
        raise RuntimeError("output unavailable")


class RecordingListener:
    """Status listener that remembers what it was told, tagged by name."""

    def __init__(self, name: str, journal: list[tuple[str, str]] | None = None) -> None:
        self.name = name
        self.journal = journal if journal is not None else []

    def __call__(self, status: str) -> None:
        self.journal.append((self.name, status))

    @property
    def received(self) -> list[str]:
        return [status for name, status in self.journal if name == self.name]
