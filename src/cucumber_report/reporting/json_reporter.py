"""
JSON reporter for the report model.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict

from .base import ReportGenerator


def _to_jsonable(value: Any) -> Any:
    if hasattr(value, "as_dict"):
        return value.as_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONReporter(ReportGenerator):
    """Generate JSON format for programmatic analysis."""

    extension = ".json"

    def generate(self, model: Dict[str, Any]) -> str:
        """Generate JSON report, leaving out the template helpers."""
        report = {key: value for key, value in model.items() if not callable(value)}
        return json.dumps(report, indent=2, default=_to_jsonable)
