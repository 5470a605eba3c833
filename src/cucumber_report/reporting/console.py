"""
Console reporter summarizing a cucumber run.
"""

import os
import sys
from typing import Any, Dict

from ..models import FAILED
from .base import ReportGenerator


def _supports_color() -> bool:
    """Return True if the output stream likely supports ANSI colours."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    # Non-TTY output (e.g. piped to a file) should not use colour
    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False
    return sys.platform != "win32"


class ConsoleReporter(ReportGenerator):
    """Generate colored console output for a report model."""

    def __init__(self) -> None:
        color = _supports_color()
        self.GREEN = "\033[92m" if color else ""
        self.RED = "\033[91m" if color else ""
        self.YELLOW = "\033[93m" if color else ""
        self.RESET = "\033[0m" if color else ""
        self.BOLD = "\033[1m" if color else ""

    def _status(self, status: str) -> str:
        color = self.RED if status == FAILED else self.GREEN
        return f"{color}{status}{self.RESET}"

    def generate(self, model: Dict[str, Any]) -> str:
        """Generate console report."""
        summary = model["summary"]
        lines = []

        lines.append(f"\n{self.BOLD}Cucumber Report{self.RESET}")
        lines.append("=" * 60)

        lines.append(f"\n{self.BOLD}Summary:{self.RESET}")
        lines.append(f"  Features: {summary.total}")
        lines.append(f"  {self.GREEN}Passed: {summary.passed}{self.RESET}")
        lines.append(f"  {self.RED}Failed: {summary.failed}{self.RESET}")
        lines.append(
            f"  Scenarios: {summary.scenarios.total} "
            f"({summary.scenarios.passed} passed, {summary.scenarios.failed} failed)"
        )
        lines.append(
            f"  Steps: {summary.steps.total} ({summary.steps.passed} passed, "
            f"{self.YELLOW}{summary.steps.skipped} skipped{self.RESET}, "
            f"{summary.steps.failed} failed)"
        )
        lines.append(f"  Duration: {summary.duration}")

        if summary.is_failed:
            lines.append(f"\n{self.RED}{self.BOLD}✗ FEATURES FAILED{self.RESET}")
        else:
            lines.append(f"\n{self.GREEN}{self.BOLD}✓ ALL FEATURES PASSED{self.RESET}")

        features = model.get("features") or []
        if features:
            lines.append(f"\n{self.BOLD}Features:{self.RESET}")
            for feature in features:
                lines.append(
                    f"  [{self._status(feature.status)}] {feature.name} ({feature.duration})"
                )
                for element in feature.scenarios:
                    if element.status == FAILED:
                        lines.append(f"      {self.RED}✗ {element.name}{self.RESET}")

        tags = model.get("tags") or []
        if tags:
            lines.append(f"\n{self.BOLD}Tags:{self.RESET}")
            for tag in tags:
                lines.append(
                    f"  [{self._status(tag['status'])}] {tag['name']}: "
                    f"{tag['scenarios']['all']} scenarios ({tag['duration']})"
                )

        lines.append("")
        return "\n".join(lines)
