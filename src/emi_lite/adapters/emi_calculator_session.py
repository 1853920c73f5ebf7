"""Calculator session: the UI-facing owner of the three loan inputs.

Every input change recomputes synchronously and re-renders through a
ResultsView. The session knows nothing about how the view draws.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from emi_lite.domain.emi import DEFAULT_LOAN_TERMS, EmiResult, LoanTerms
from emi_lite.domain.errors import ValidationError
from emi_lite.domain.formatting import format_currency, format_number
from emi_lite.ports.results_view import InputDisplay, ResultsDisplay, ResultsView
from emi_lite.use_cases.calculate_emi import CalculateEmi

logger = logging.getLogger(__name__)

RawInput = str | float | int


class EmiCalculatorSession:
    """
    Owns the current principal, annual rate and tenure.

    Responsibilities:
    - Parse raw control values (numbers or numeric strings)
    - Recompute and render on every change
    - Restore the default inputs on reset

    Any finite number is accepted; range policy is left to the controls.
    """

    def __init__(
        self,
        view: ResultsView,
        calculator: CalculateEmi | None = None,
        defaults: LoanTerms = DEFAULT_LOAN_TERMS,
    ) -> None:
        """
        Initialize the session with the default inputs. Nothing is rendered
        until start() or the first input change.

        Args:
            view: Where inputs and results are rendered
            calculator: Use case used for every recomputation
            defaults: Inputs used at startup and restored by reset()
        """
        self._view = view
        self._calculator = calculator or CalculateEmi()
        self._defaults = defaults
        self._terms = defaults

    @property
    def view(self) -> ResultsView:
        return self._view

    @property
    def terms(self) -> LoanTerms:
        return self._terms

    def start(self) -> EmiResult:
        """Initial calculation with whatever the current inputs are."""
        return self.recompute()

    def set_principal(self, raw: RawInput) -> EmiResult:
        return self.update(principal=raw)

    def set_annual_rate(self, raw: RawInput) -> EmiResult:
        return self.update(annual_rate_percent=raw)

    def set_months(self, raw: RawInput) -> EmiResult:
        return self.update(months=raw)

    def update(
        self,
        principal: RawInput | None = None,
        annual_rate_percent: RawInput | None = None,
        months: RawInput | None = None,
    ) -> EmiResult:
        """
        Apply one or more raw input values, then recompute once.

        Inputs left as None keep their current value.

        Raises:
            ValidationError: If any provided value is not a finite number.
                The current inputs are left unchanged.
        """
        errors: list[dict[str, str]] = []
        changes: dict[str, float | int] = {}

        if principal is not None:
            parsed = _parse_number("principal", principal, errors)
            if parsed is not None:
                changes["principal"] = parsed
        if annual_rate_percent is not None:
            parsed = _parse_number("annual_rate_percent", annual_rate_percent, errors)
            if parsed is not None:
                changes["annual_rate_percent"] = parsed
        if months is not None:
            parsed_months = _parse_months(months, errors)
            if parsed_months is not None:
                changes["months"] = parsed_months

        if errors:
            logger.info("Rejected calculator input", extra={"errors": errors})
            raise ValidationError(errors=errors)

        self._terms = replace(self._terms, **changes)
        return self.recompute()

    def reset(self) -> EmiResult:
        """Restore the default inputs and recompute."""
        self._terms = self._defaults
        logger.debug("Calculator reset to defaults")
        return self.recompute()

    def recompute(self) -> EmiResult:
        terms = self._terms
        result = self._calculator.execute(terms)

        self._view.render_inputs(
            InputDisplay(
                principal=format_number(terms.principal),
                annual_rate_percent=format_number(terms.annual_rate_percent),
                months=str(terms.months),
            )
        )
        self._view.render_results(
            ResultsDisplay(
                emi=format_currency(result.emi),
                total_payment=format_currency(result.total_payment),
                total_interest=format_currency(result.total_interest),
            )
        )
        self._view.reveal_results()

        return result


def _parse_number(field: str, raw: RawInput, errors: list[dict[str, str]]) -> float | None:
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        errors.append(
            {"field": field, "message": f"Must be a number: {raw}", "code": "INVALID_NUMBER"}
        )
        return None

    if not math.isfinite(value):
        errors.append(
            {"field": field, "message": f"Must be a finite number: {raw}", "code": "INVALID_NUMBER"}
        )
        return None

    return value


def _parse_months(raw: RawInput, errors: list[dict[str, str]]) -> int | None:
    if isinstance(raw, int):
        return raw

    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass

    value = _parse_number("months", raw, errors)
    if value is None:
        return None

    # Integer controls truncate toward zero
    return int(value)
