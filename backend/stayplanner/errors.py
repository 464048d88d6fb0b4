"""Planner error taxonomy.

Only NoCandidatesError and NoBrandCandidatesError ever leave the pipeline.
ExtractionDegraded and SourceUnavailable are raised and recovered internally.
"""


class PlannerError(Exception):
    """Base class for all planner domain errors."""


class ExtractionDegraded(PlannerError):
    """Structured extraction failed or returned invalid data."""


class SourceUnavailable(PlannerError):
    """A single brand search timed out or errored."""

    def __init__(self, brand: str, reason: str):
        super().__init__(f"{brand} source unavailable: {reason}")
        self.brand = brand
        self.reason = reason


class SearchResultParseError(PlannerError):
    """A single content-search record failed validation."""


class NoCandidatesError(PlannerError):
    """No hotel passed the ranking filter."""

    user_message = "No hotels found matching your criteria. Try adjusting your search."


class NoBrandCandidatesError(PlannerError):
    """The selected brand has no qualifying hotel."""

    user_message = "No hotels found for selected brand. Try adjusting your search."

    def __init__(self, brand: str):
        super().__init__(f"No qualifying hotels for brand {brand}")
        self.brand = brand
