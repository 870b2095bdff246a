"""Abstract output collaborator.

Defined in the domain layer so the processor and notification service
never depend on where their messages end up. Concrete implementations
(console, log) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reporter(ABC):

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit a single line of output."""
