from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InputDisplay:
    """Display strings for the current calculator inputs."""

    principal: str
    annual_rate_percent: str
    months: str


@dataclass(frozen=True, slots=True)
class ResultsDisplay:
    """Display strings for a calculated EMI result."""

    emi: str
    total_payment: str
    total_interest: str


class ResultsView(ABC):
    """
    Port for whatever renders the calculator (page, terminal, JSON payload).

    Contract:
        - Receives already-formatted strings; never formats or computes
        - reveal_results() is idempotent: revealing a visible panel is a no-op
    """

    @abstractmethod
    def render_inputs(self, inputs: InputDisplay) -> None:
        """Show the current input values next to their controls."""
        ...

    @abstractmethod
    def render_results(self, results: ResultsDisplay) -> None:
        """Write the three result fields into their output slots."""
        ...

    @abstractmethod
    def reveal_results(self) -> None:
        """Make the results panel visible."""
        ...
