from __future__ import annotations

from emi_lite.adapters.in_memory_results_view import InMemoryResultsView
from emi_lite.domain.errors import InternalError
from emi_lite.entrypoints.http.dtos.calculator import CalculatorPanelDTO, InputDisplayDTO
from emi_lite.entrypoints.http.dtos.emi import FormattedEmiDTO


class CalculatorMapper:
    """Maps a rendered calculator view to its REST representation."""

    @staticmethod
    def to_panel(view: InMemoryResultsView) -> CalculatorPanelDTO:
        """
        Converts the last rendered state of a view to a panel DTO.

        Raises:
            InternalError: If the view was never rendered (session not started)
        """
        if view.inputs is None or view.results is None:
            raise InternalError("Calculator view has not been rendered")

        return CalculatorPanelDTO(
            inputs=InputDisplayDTO(
                principal=view.inputs.principal,
                annual_rate_percent=view.inputs.annual_rate_percent,
                months=view.inputs.months,
            ),
            results=FormattedEmiDTO(
                emi=view.results.emi,
                total_payment=view.results.total_payment,
                total_interest=view.results.total_interest,
            ),
            results_visible=view.results_visible,
        )
