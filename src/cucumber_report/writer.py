"""
Writing of the rendered report and its generated images.
"""

import logging
from pathlib import Path
from typing import Iterable

from .artifacts import ImageWriteRequest
from .exceptions import ReportWriteError

logger = logging.getLogger(__name__)


def create_directory(dest: str) -> Path:
    """Create the output directory if it does not exist yet."""
    path = Path(dest)
    if path.exists():
        logger.info("Directory already exists: %s", dest)
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ReportWriteError(dest, e)
    logger.info("Created directory: %s", dest)
    return path


def write_images(requests: Iterable[ImageWriteRequest]) -> int:
    """
    Persist decoded images.

    Returns:
        Number of images written

    Raises:
        ReportWriteError: If any image cannot be written
    """
    count = 0
    for request in requests:
        try:
            Path(request.path).write_bytes(request.data)
        except OSError as e:
            raise ReportWriteError(request.path, e)
        logger.info("Wrote %s", request.path)
        count += 1
    return count


def write_report(dest: str, name: str, content: str) -> Path:
    """Write the rendered report to ``dest/name``."""
    path = Path(dest) / (name or "index.html")
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(path), e)
    logger.info("Report written to %s", path)
    return path
