"""
Data models for cucumber test results and report summaries.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"
SCENARIO = "scenario"


def _list_of_dicts(raw: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Return ``raw[key]`` as a list of objects, treating a missing key as empty."""
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, dict):
            raise ValueError(f"'{key}' entries must be objects, got {type(item).__name__}")
    return value


def _tag_names(raw: Dict[str, Any]) -> List[str]:
    value = raw.get("tags")
    if not value:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'tags' must be a list, got {type(value).__name__}")
    return [tag["name"] if isinstance(tag, dict) else str(tag) for tag in value]


@dataclass
class Embedding:
    """An artifact attached to a step."""

    mime_type: Optional[str]
    data: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Embedding":
        mime_type = raw.get("mime_type")
        if mime_type is None and isinstance(raw.get("media"), dict):
            mime_type = raw["media"].get("type")
        return cls(mime_type=mime_type, data=raw.get("data") or "")


@dataclass
class StepResult:
    """Outcome of a single step."""

    status: Optional[str] = None
    duration: Optional[int] = None
    error_message: Optional[str] = None
    converted_duration: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "StepResult":
        if not raw:
            return cls()
        duration = raw.get("duration")
        return cls(
            status=raw.get("status"),
            duration=int(duration) if duration is not None else None,
            error_message=raw.get("error_message"),
        )


@dataclass
class Step:
    """A single step of a scenario or background."""

    name: Optional[str]
    keyword: str = ""
    line: Optional[int] = None
    result: StepResult = field(default_factory=StepResult)
    embeddings: List[Embedding] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if the step can be displayed."""
        return self.name is not None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Step":
        return cls(
            name=raw.get("name"),
            keyword=raw.get("keyword") or "",
            line=raw.get("line"),
            result=StepResult.from_dict(raw.get("result")),
            embeddings=[Embedding.from_dict(e) for e in _list_of_dicts(raw, "embeddings")],
        )


@dataclass
class Element:
    """A scenario, background or other child of a feature."""

    name: Optional[str]
    type: Optional[str] = None
    id: Optional[str] = None
    keyword: str = ""
    line: Optional[int] = None
    description: str = ""
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)

    # Derived during aggregation
    status: Optional[str] = None
    image_name: List[str] = field(default_factory=list)
    plain_text_metadata: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    @property
    def is_scenario(self) -> bool:
        return self.type == SCENARIO

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Element":
        return cls(
            name=raw.get("name"),
            type=raw.get("type"),
            id=raw.get("id"),
            keyword=raw.get("keyword") or "",
            line=raw.get("line"),
            description=raw.get("description") or "",
            tags=_tag_names(raw),
            steps=[Step.from_dict(s) for s in _list_of_dicts(raw, "steps")],
        )


@dataclass
class Feature:
    """A feature with its scenarios."""

    name: Optional[str]
    id: Optional[str] = None
    uri: Optional[str] = None
    keyword: str = ""
    line: Optional[int] = None
    description: str = ""
    tags: List[str] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)

    # Derived during aggregation
    status: Optional[str] = None
    joined_tags: str = ""
    duration: Optional[str] = None
    index: Optional[int] = None

    @property
    def scenarios(self) -> List[Element]:
        return [e for e in self.elements if e.is_scenario]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Feature":
        if not isinstance(raw, dict):
            raise ValueError(f"feature must be an object, got {type(raw).__name__}")
        return cls(
            name=raw.get("name"),
            id=raw.get("id"),
            uri=raw.get("uri"),
            keyword=raw.get("keyword") or "",
            line=raw.get("line"),
            description=raw.get("description") or "",
            tags=_tag_names(raw),
            elements=[Element.from_dict(e) for e in _list_of_dicts(raw, "elements")],
        )


@dataclass
class StepCounts:
    """Step totals bucketed by outcome."""

    total: int = 0
    passed: int = 0
    skipped: int = 0
    failed: int = 0

    def add(self, bucket: str) -> None:
        self.total += 1
        setattr(self, bucket, getattr(self, bucket) + 1)

    def as_dict(self) -> Dict[str, int]:
        return {
            "all": self.total,
            "passed": self.passed,
            "skipped": self.skipped,
            "failed": self.failed,
        }


@dataclass
class ScenarioCounts:
    """Scenario totals bucketed by outcome."""

    total: int = 0
    passed: int = 0
    failed: int = 0

    def add(self, status: str) -> None:
        self.total += 1
        setattr(self, status, getattr(self, status) + 1)

    def as_dict(self) -> Dict[str, int]:
        return {"all": self.total, "passed": self.passed, "failed": self.failed}


@dataclass
class TagSummary:
    """Rollup of every scenario under features carrying one tag."""

    name: str
    scenarios: ScenarioCounts = field(default_factory=ScenarioCounts)
    steps: StepCounts = field(default_factory=StepCounts)
    duration: Any = 0
    status: str = PASSED

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "scenarios": self.scenarios.as_dict(),
            "steps": self.steps.as_dict(),
            "duration": self.duration,
            "status": self.status,
        }


@dataclass
class Summary:
    """Whole-run rollup across all features."""

    total: int
    passed: int
    failed: int
    scenarios: ScenarioCounts
    steps: StepCounts
    duration: str
    status: str

    @property
    def is_failed(self) -> bool:
        """Return True if any feature failed."""
        return self.status == FAILED

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "scenarios": self.scenarios.as_dict(),
            "steps": self.steps.as_dict(),
            "duration": self.duration,
            "status": self.status,
            "is_failed": self.is_failed,
        }
