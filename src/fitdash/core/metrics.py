"""Metric input fields - pure state, no I/O."""

import re
from dataclasses import dataclass, field

_DIGITS = re.compile(r"[0-9]+")


def filter_numeric(candidate: str) -> str | None:
    """
    Accept the empty string or a run of decimal digits.

    Returns the candidate unchanged when accepted, None when rejected.
    """
    if candidate == "" or _DIGITS.fullmatch(candidate):
        return candidate
    return None


@dataclass
class MetricField:
    """A numeric display value kept as text. Empty means unset."""

    label: str
    value: str = ""

    @property
    def is_set(self) -> bool:
        return self.value != ""

    def enter(self, candidate: str) -> bool:
        """Replace the value if the candidate passes the filter.

        Rejected input leaves the previous value in place.
        """
        accepted = filter_numeric(candidate)
        if accepted is None:
            return False
        self.value = accepted
        return True


@dataclass
class Metrics:
    """Home view metrics: daily steps and average heart rate."""

    steps: MetricField = field(default_factory=lambda: MetricField("Daily Steps"))
    heart_rate: MetricField = field(default_factory=lambda: MetricField("Avg Heart Rate"))

    def set_steps(self, candidate: str) -> bool:
        return self.steps.enter(candidate)

    def set_heart_rate(self, candidate: str) -> bool:
        return self.heart_rate.enter(candidate)
