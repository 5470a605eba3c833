"""
Loading of cucumber JSON result documents.
"""

import json
import logging
from typing import Any, List

from .exceptions import ReportParseError
from .models import Feature

logger = logging.getLogger(__name__)


def parse_features(raw: Any, source: str = "<document>") -> List[Feature]:
    """
    Convert a decoded cucumber JSON document into features.

    Args:
        raw: Decoded JSON document
        source: Where the document came from, used in error messages

    Returns:
        List of Feature objects in document order

    Raises:
        ReportParseError: If the document does not have the cucumber shape
    """
    if not isinstance(raw, list):
        raise ReportParseError(
            source, ValueError(f"expected a list of features, got {type(raw).__name__}")
        )
    try:
        return [Feature.from_dict(item) for item in raw]
    except (ValueError, TypeError, KeyError, AttributeError) as e:
        raise ReportParseError(source, e)


def load_features(path: str) -> List[Feature]:
    """
    Read and parse a cucumber JSON results file.

    Raises:
        ReportParseError: If the file is not valid UTF-8 JSON or has the wrong shape
        FileNotFoundError: If the file does not exist
    """
    logger.info("Loading cucumber results from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ReportParseError(path, e)

    features = parse_features(raw, source=path)
    logger.debug("Parsed %d features from %s", len(features), path)
    return features
