"""
Whole-run summary of aggregated features.
"""

from typing import List

from .duration import format_duration
from .models import FAILED, PASSED, Feature, ScenarioCounts, StepCounts, Summary
from .status import feature_status, scenario_status, step_bucket


def calculate_summary(features: List[Feature]) -> Summary:
    """
    Roll up feature, scenario and step outcomes across the whole run.

    Args:
        features: Features to summarize, with or without derived statuses

    Returns:
        Summary with counts, total duration and overall status
    """
    passed = 0
    failed = 0
    scenarios = ScenarioCounts()
    steps = StepCounts()
    duration = 0

    for feature in features:
        if (feature.status or feature_status(feature)) == FAILED:
            failed += 1
        else:
            passed += 1

        for element in feature.elements:
            duration += sum(step.result.duration or 0 for step in element.steps)
            if not element.is_scenario:
                continue
            scenarios.add(element.status or scenario_status(element))
            for step in element.steps:
                steps.add(step_bucket(step.result.status))

    return Summary(
        total=len(features),
        passed=passed,
        failed=failed,
        scenarios=scenarios,
        steps=steps,
        duration=format_duration(duration),
        status=FAILED if failed else PASSED,
    )
