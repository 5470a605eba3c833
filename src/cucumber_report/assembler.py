"""
Assembly of the flat report model handed to a template renderer.
"""

import base64
import html
import os
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from jinja2.utils import htmlsafe_json_dumps

from .aggregation import AggregationResult
from .config import ReportOptions

ReadBytes = Callable[[str], bytes]
ListDir = Callable[[str], List[str]]

_WHITESPACE = re.compile(r"\s")


def _read_bytes(path: str) -> bytes:
    return Path(path).read_bytes()


def _image_mime_subtype(file_name: str) -> str:
    extension = file_name.split(".")[-1]
    return "svg+xml" if extension == "svg" else extension


def _data_uri(subtype: str, payload: bytes) -> str:
    return f"data:image/{subtype};base64,{base64.b64encode(payload).decode('ascii')}"


def encode_logo(logo_path: str, read_bytes: ReadBytes = _read_bytes) -> str:
    """Encode the logo as a data URI, deriving the MIME type from its extension."""
    return _data_uri(_image_mime_subtype(logo_path), read_bytes(logo_path))


def encode_screenshots(
    directory: Optional[str],
    list_dir: ListDir = os.listdir,
    read_bytes: ReadBytes = _read_bytes,
) -> Optional[List[Dict[str, str]]]:
    """
    Encode every image in a directory as a data URI.

    Hidden files are skipped.

    Args:
        directory: Screenshot directory, or None when screenshots are disabled
        list_dir: Callable listing file names in a directory
        read_bytes: Callable reading a file's contents

    Returns:
        List of ``{"name", "url"}`` dicts in file name order, or None
    """
    if not directory:
        return None

    screenshots = []
    for file_name in sorted(list_dir(directory)):
        if file_name.startswith("."):
            continue
        stem = file_name.rsplit(".", 1)[0] if "." in file_name else file_name
        screenshots.append(
            {
                "name": _WHITESPACE.sub("_", stem, count=1),
                "url": _data_uri(
                    _image_mime_subtype(file_name),
                    read_bytes(os.path.join(directory, file_name)),
                ),
            }
        )
    return screenshots


def image_formatter(src: str) -> str:
    """Render a comma-joined list of image sources as ``<img>`` tags."""
    if not src:
        return ""
    return "".join(f'<img src="{html.escape(image)}" />' for image in src.split(","))


def duration_formatter(text: str) -> str:
    """Durations are converted during aggregation, so pass them through."""
    return text


def assemble_report_model(
    options: ReportOptions,
    result: AggregationResult,
    read_bytes: ReadBytes = _read_bytes,
    list_dir: ListDir = os.listdir,
) -> Dict[str, Any]:
    """
    Merge aggregation output with options into one template-ready model.

    Args:
        options: Report options; extra keys are passed through
        result: Output of the aggregation pass
        read_bytes: Callable reading logo and screenshot files
        list_dir: Callable listing the screenshot directory

    Returns:
        Flat dict ready for rendering
    """
    scenario_elements = result.scenario_elements
    steps_summary = [counts.as_dict() for counts in result.steps_summary]
    scenarios = [counts.as_dict() for counts in result.scenarios]
    tags = [tag.as_dict() for tag in result.tags]

    model = options.as_dict()
    model.update(
        features=result.features,
        features_json=htmlsafe_json_dumps([element.name for element in scenario_elements]),
        steps_summary=steps_summary,
        steps_json=htmlsafe_json_dumps(steps_summary),
        scenarios=scenarios,
        scenarios_json=htmlsafe_json_dumps(scenarios),
        scenarios_summary=htmlsafe_json_dumps([asdict(element) for element in scenario_elements]),
        summary=result.summary,
        logo=encode_logo(options.logo, read_bytes),
        screenshots=encode_screenshots(options.screenshots, list_dir, read_bytes),
        tags=tags,
        tags_json=htmlsafe_json_dumps(tags),
        image=image_formatter,
        duration=duration_formatter,
    )
    return model
