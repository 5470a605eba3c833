"""
Classification of step, scenario and feature outcomes.
"""

from typing import Optional

from .models import FAILED, PASSED, SKIPPED, Element, Feature

NON_FAILING_STATUSES = (PASSED, SKIPPED)


def step_bucket(status: Optional[str]) -> str:
    """
    Map a raw step status onto a counting bucket.

    Anything other than ``passed`` or ``skipped``, including a missing or
    unrecognised status, is counted as ``failed``.
    """
    if status in NON_FAILING_STATUSES:
        return status
    return FAILED


def scenario_status(element: Element) -> str:
    """Return ``failed`` if any step did not pass or skip, else ``passed``."""
    for step in element.steps:
        if step.result.status not in NON_FAILING_STATUSES:
            return FAILED
    return PASSED


def feature_status(feature: Feature) -> str:
    """Return ``failed`` if any scenario of the feature failed, else ``passed``."""
    for element in feature.scenarios:
        status = element.status or scenario_status(element)
        if status == FAILED:
            return FAILED
    return PASSED
