from __future__ import annotations

from emi_lite.ports.results_view import InputDisplay, ResultsDisplay, ResultsView


class InMemoryResultsView(ResultsView):
    """
    Canonical view implementation for tests and the HTTP entrypoint.

    - Keeps only the most recently rendered inputs and results
    - Results panel starts hidden and stays visible once revealed
    - render_count counts render_results() calls
    """

    def __init__(self) -> None:
        self.inputs: InputDisplay | None = None
        self.results: ResultsDisplay | None = None
        self.results_visible = False
        self.render_count = 0

    def render_inputs(self, inputs: InputDisplay) -> None:
        self.inputs = inputs

    def render_results(self, results: ResultsDisplay) -> None:
        self.results = results
        self.render_count += 1

    def reveal_results(self) -> None:
        self.results_visible = True
