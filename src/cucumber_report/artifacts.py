"""
Normalization of artifacts embedded in cucumber steps.

Images are decoded and turned into write requests for the writer, while
plain text and browser logs are decoded onto the owning element.
"""

import base64
import binascii
import logging
import os
import re
from dataclasses import dataclass, replace
from typing import List, Tuple

from .exceptions import ArtifactDecodeError
from .models import Element, Embedding

logger = logging.getLogger(__name__)

IMAGE_PNG = "image/png"
TEXT_PLAIN = "text/plain"
TEXT_LOG = "text/log"

_NON_ASCII = re.compile(r"[^\x00-\x7F]")
_WHITESPACE = re.compile(r"\s")


@dataclass
class ImageWriteRequest:
    """A decoded image waiting to be persisted next to the report."""

    path: str
    data: bytes

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


def create_file_name(text: str) -> str:
    """Make a lower-case, ASCII-only file name with underscores for whitespace."""
    return _WHITESPACE.sub("_", _NON_ASCII.sub("", text)).lower()


def _decode(embedding: Embedding, element: Element) -> bytes:
    try:
        return base64.b64decode(embedding.data)
    except (binascii.Error, ValueError) as e:
        raise ArtifactDecodeError(embedding.mime_type or "", element.name or "", e)


def normalize_element(element: Element, dest: str) -> Tuple[Element, List[ImageWriteRequest]]:
    """
    Extract the embeddings of an element's steps into report-ready fields.

    Embeddings are processed in declaration order across all steps, before
    unnamed steps are dropped, so artifacts attached to unnamed steps are
    still captured.

    Args:
        element: Scenario element to normalize
        dest: Directory the generated images will be written to

    Returns:
        Tuple of the enriched element and the image write requests

    Raises:
        ArtifactDecodeError: If an embedding payload is not valid base64
    """
    image_names: List[str] = list(element.image_name)
    plain_text: List[str] = list(element.plain_text_metadata)
    logs: List[str] = list(element.logs)
    requests: List[ImageWriteRequest] = []
    image_count = 1

    for step in element.steps:
        for embedding in step.embeddings:
            if embedding.mime_type == IMAGE_PNG:
                image_name = create_file_name(
                    f"{element.name or ''}-{element.line if element.line is not None else ''}"
                    f"-{image_count}"
                ) + ".png"
                requests.append(
                    ImageWriteRequest(path=os.path.join(dest, image_name), data=_decode(embedding, element))
                )
                image_names.append(image_name)
                image_count += 1
            elif embedding.mime_type == TEXT_PLAIN:
                plain_text.append(_decode(embedding, element).decode("utf-8", errors="replace"))
            elif embedding.mime_type == TEXT_LOG:
                logs = _decode(embedding, element).decode("ascii", errors="replace").split("\n")
            else:
                logger.debug(
                    "Ignoring %s embedding in '%s'", embedding.mime_type, element.name
                )

    steps = [replace(step, embeddings=[]) for step in element.steps if step.is_valid]
    normalized = replace(
        element,
        steps=steps,
        image_name=image_names,
        plain_text_metadata=plain_text,
        logs=logs,
    )
    return normalized, requests
