"""
Reporting modules for the cucumber report generator.
"""

from .base import ReportGenerator
from .console import ConsoleReporter
from .html import HTMLReporter
from .json_reporter import JSONReporter

__all__ = ["ReportGenerator", "ConsoleReporter", "HTMLReporter", "JSONReporter"]
