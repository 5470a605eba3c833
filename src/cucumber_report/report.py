"""
Report builder orchestrating loading, aggregation, rendering and writing.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .aggregation import aggregate
from .artifacts import ImageWriteRequest
from .assembler import assemble_report_model
from .config import ReportOptions, require_valid_options
from .loader import load_features
from .models import Summary
from .reporting import HTMLReporter, ReportGenerator
from .writer import create_directory, write_images, write_report

logger = logging.getLogger(__name__)


@dataclass
class BuiltReport:
    """A fully aggregated report waiting to be written."""

    model: Dict[str, Any]
    summary: Summary
    images: List[ImageWriteRequest] = field(default_factory=list)


class ReportBuilder:
    """Builds and writes a report from cucumber JSON results."""

    def __init__(self, options: ReportOptions):
        self.options = options

    def build(self) -> BuiltReport:
        """
        Validate options, then load, aggregate and assemble the report model.

        Returns:
            BuiltReport with the model and pending image writes

        Raises:
            ConfigurationError: If the input or template path does not exist
            ReportParseError: If the input cannot be parsed
        """
        require_valid_options(self.options)

        features = load_features(self.options.source)
        result = aggregate(features, self.options.dest)
        model = assemble_report_model(self.options, result)
        return BuiltReport(model=model, summary=result.summary, images=result.images)

    def write(self, built: BuiltReport, reporter: Optional[ReportGenerator] = None) -> Path:
        """
        Write generated images and the rendered report to the destination.

        The report is rendered before anything touches the disk; images are
        then written ahead of the report so its references resolve.

        Args:
            built: Output of build()
            reporter: Renderer to use (defaults to HTML with the configured template)

        Returns:
            Path of the written report

        Raises:
            ReportRenderError: If the template fails to render
            ReportWriteError: If any file cannot be written
        """
        reporter = reporter or HTMLReporter(self.options.template)
        content = reporter.generate(built.model)
        create_directory(self.options.dest)
        write_images(built.images)
        return write_report(self.options.dest, self.options.name, content)

    def run(self, reporter: Optional[ReportGenerator] = None) -> BuiltReport:
        """Build and write the report in one go."""
        built = self.build()
        path = self.write(built, reporter)
        logger.info("Report created successfully: %s", path)
        return built
