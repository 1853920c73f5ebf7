"""
Dependency injection for FastAPI routes.

Key principle: calculator sessions hold input state, so they are per-request,
never cached. Only stateless singletons use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from emi_lite.adapters.emi_calculator_session import EmiCalculatorSession
from emi_lite.adapters.in_memory_results_view import InMemoryResultsView
from emi_lite.use_cases.calculate_emi import CalculateEmi


@lru_cache
def get_calculate_emi_use_case() -> CalculateEmi:
    """Stateless use case shared by all requests."""
    return CalculateEmi()


def get_results_view() -> InMemoryResultsView:
    """Fresh view per request."""
    return InMemoryResultsView()


def get_calculator_session(
    view: InMemoryResultsView = Depends(get_results_view),
    use_case: CalculateEmi = Depends(get_calculate_emi_use_case),
) -> EmiCalculatorSession:
    """
    Factory for a started calculator session.

    Each request gets:
    - Its own view
    - Its own session, at the default inputs, already rendered once

    Args:
        view: Results view (injected by FastAPI)
        use_case: Shared CalculateEmi use case (injected by FastAPI)

    Returns:
        EmiCalculatorSession: Session after its initial calculation
    """
    session = EmiCalculatorSession(view=view, calculator=use_case)
    session.start()
    return session
