"""
Aggregation of cucumber results into per-feature and per-tag summaries.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Sequence, TypeVar, Union

from .artifacts import ImageWriteRequest, normalize_element
from .duration import convert_duration, format_duration
from .models import FAILED, Element, Feature, ScenarioCounts, StepCounts, Summary, TagSummary
from .status import feature_status, scenario_status, step_bucket
from .summary import calculate_summary

logger = logging.getLogger(__name__)

Sortable = TypeVar("Sortable", bound=Union[Element, Feature])


@dataclass
class AggregationResult:
    """Everything the report model needs from one aggregation pass."""

    features: List[Feature]
    steps_summary: List[StepCounts]
    scenarios: List[ScenarioCounts]
    tags: List[TagSummary]
    summary: Summary
    images: List[ImageWriteRequest] = field(default_factory=list)

    @property
    def scenario_elements(self) -> List[Element]:
        return [element for feature in self.features for element in feature.scenarios]


def sort_by_status_and_name(items: Sequence[Sortable]) -> List[Sortable]:
    """
    Sort by status, then name, both ascending.

    ``failed`` sorts before ``passed``. Items without a status (backgrounds)
    sort before both. The sort is stable.
    """
    return sorted(items, key=lambda item: (item.status or "", item.name or ""))


def _convert_step_durations(element: Element) -> Element:
    steps = [
        replace(
            step,
            embeddings=[],
            result=replace(step.result, converted_duration=convert_duration(step.result.duration)),
        )
        for step in element.steps
    ]
    return replace(element, steps=steps)


def _process_feature(feature: Feature, dest: str, images: List[ImageWriteRequest]) -> Feature:
    elements: List[Element] = []
    for element in feature.elements:
        if element.is_scenario:
            status = scenario_status(element)
            element, requests = normalize_element(element, dest)
            element = replace(element, status=status)
            images.extend(requests)
        elements.append(_convert_step_durations(element))

    processed = replace(feature, elements=elements, joined_tags=", ".join(feature.tags))
    return replace(
        processed,
        status=feature_status(processed),
        elements=sort_by_status_and_name(processed.elements),
    )


def _feature_duration(feature: Feature) -> str:
    total = sum(step.result.duration or 0 for element in feature.elements for step in element.steps)
    return format_duration(total)


def count_steps(feature: Feature) -> StepCounts:
    """Count the steps of every scenario in a feature by outcome."""
    counts = StepCounts()
    for element in feature.scenarios:
        for step in element.steps:
            counts.add(step_bucket(step.result.status))
    return counts


def count_scenarios(feature: Feature) -> ScenarioCounts:
    """Count the scenarios of a feature by status."""
    counts = ScenarioCounts()
    for element in feature.scenarios:
        counts.add(element.status or scenario_status(element))
    return counts


def map_tags(features: Sequence[Feature]) -> List[TagSummary]:
    """
    Roll up scenarios, steps and durations per feature tag.

    Buckets are ordered by first appearance of their tag. A tag repeated on
    the same feature only counts that feature once.

    Args:
        features: Features with derived scenario statuses

    Returns:
        Tag summaries with durations formatted for display
    """
    tags: Dict[str, TagSummary] = {}
    raw_durations: Dict[str, int] = {}

    for feature in features:
        for tag in dict.fromkeys(feature.tags):
            if tag not in tags:
                tags[tag] = TagSummary(name=tag)
                raw_durations[tag] = 0
            bucket = tags[tag]

            for element in feature.scenarios:
                bucket.scenarios.add(element.status or scenario_status(element))
                for step in element.steps:
                    raw_durations[tag] += step.result.duration or 0
                    bucket.steps.add(step_bucket(step.result.status))

            if bucket.scenarios.failed > 0:
                bucket.status = FAILED

    for name, bucket in tags.items():
        bucket.duration = format_duration(raw_durations[name])
    return list(tags.values())


def aggregate(features: Sequence[Feature], dest: str) -> AggregationResult:
    """
    Run a full aggregation pass over parsed features.

    The input features are left untouched; enriched copies are returned.

    Args:
        features: Parsed features in document order
        dest: Directory generated images are destined for

    Returns:
        AggregationResult with sorted features, summaries and image requests
    """
    images: List[ImageWriteRequest] = []
    processed = [_process_feature(feature, dest, images) for feature in features]

    # Tag buckets follow document order, so roll them up before sorting.
    tags = map_tags(processed)

    ordered = [
        replace(feature, index=index, duration=_feature_duration(feature))
        for index, feature in enumerate(sort_by_status_and_name(processed))
    ]

    result = AggregationResult(
        features=ordered,
        steps_summary=[count_steps(feature) for feature in ordered],
        scenarios=[count_scenarios(feature) for feature in ordered],
        tags=tags,
        summary=calculate_summary(ordered),
        images=images,
    )
    logger.info(
        "Aggregated %d features, %d scenarios, %d tags, %d images",
        len(ordered),
        len(result.scenario_elements),
        len(tags),
        len(images),
    )
    return result
