"""
Base class for report generators.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ReportGenerator(ABC):
    """Base class for rendering an assembled report model."""

    #: Suggested file extension for generated output
    extension = ".txt"

    @abstractmethod
    def generate(self, model: Dict[str, Any]) -> str:
        """
        Generate a report from the assembled model.

        Args:
            model: Flat report model from assemble_report_model

        Returns:
            Report as a string
        """
        pass
