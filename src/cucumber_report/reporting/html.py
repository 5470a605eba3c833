"""
HTML reporter rendering the report model through a Jinja2 template.
"""

import logging
import os
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from ..assembler import duration_formatter, image_formatter
from ..config import PACKAGE_DIR
from ..exceptions import ReportRenderError
from .base import ReportGenerator

logger = logging.getLogger(__name__)

TEMPLATE_DIR = PACKAGE_DIR / "templates"
DEFAULT_TEMPLATE = "report.html.j2"


def _image_filter(src: Any) -> Markup:
    if isinstance(src, (list, tuple)):
        src = ",".join(src)
    return Markup(image_formatter(src or ""))


class HTMLReporter(ReportGenerator):
    """Render the report as a standalone HTML page."""

    extension = ".html"

    def __init__(self, template: Optional[str] = None) -> None:
        if template:
            search_path = os.path.dirname(os.path.abspath(template))
            self.template_name = os.path.basename(template)
        else:
            search_path = str(TEMPLATE_DIR)
            self.template_name = DEFAULT_TEMPLATE

        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(["html", "htm", "j2"]),
        )
        self.env.filters["image"] = _image_filter
        self.env.filters["duration"] = duration_formatter

    def generate(self, model: Dict[str, Any]) -> str:
        """Generate HTML report."""
        logger.debug("Rendering template %s", self.template_name)
        try:
            template = self.env.get_template(self.template_name)
            return template.render(**model)
        except TemplateError as e:
            raise ReportRenderError(self.template_name, e)
