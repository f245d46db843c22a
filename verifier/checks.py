"""
Expectation checks.
Compares what a scenario observed on the page against its expectation.
"""

import re
from typing import Optional, Tuple
from pydantic import BaseModel

from .models import CheckKind, Scenario


class Observation(BaseModel):
    """What a scenario read back from the page."""
    actual: str = ""
    previous: Optional[str] = None   # value before append / clear
    visible: Optional[bool] = None


def evaluate(scenario: Scenario, observation: Observation) -> Tuple[bool, str]:
    """
    Evaluate a scenario's check.

    Returns:
        Tuple of (passed, message)
    """
    check = scenario.check
    actual = observation.actual
    expected = scenario.expected

    if check == CheckKind.EQUALS:
        if actual == expected:
            return True, "output matches"
        return False, f"expected {expected!r}, got {actual!r}"

    if check == CheckKind.NOT_EQUALS:
        if actual != expected:
            return True, "output differs from the known-imperfect transliteration"
        return False, f"output unexpectedly equals {expected!r}"

    if check == CheckKind.NOT_EMPTY:
        if actual:
            return True, "output is not empty"
        return False, "output is empty"

    if check == CheckKind.CONTAINS:
        if actual and expected and expected in actual:
            return True, f"output contains {expected!r}"
        return False, f"expected output containing {expected!r}, got {actual!r}"

    if check == CheckKind.MATCHES:
        if expected is not None and re.search(expected, actual):
            return True, f"output matches /{expected}/"
        return False, f"expected output matching /{expected}/, got {actual!r}"

    if check == CheckKind.VISIBLE:
        if observation.visible:
            return True, "output is visible"
        return False, "output is not visible"

    if check == CheckKind.CHANGES_ON_APPEND:
        if observation.previous is not None and actual != observation.previous:
            return True, "output updated after more input"
        return False, f"output did not change from {observation.previous!r}"

    if check == CheckKind.CLEARS:
        if not observation.previous:
            return False, "output was empty before clearing"
        if actual == "":
            return True, "output cleared with input"
        return False, f"output not cleared, got {actual!r}"

    raise ValueError(f"Unsupported check: {check}")
