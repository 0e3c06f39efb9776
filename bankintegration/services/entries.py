"""Locate the entries array in a raw report body and hand it to an exporter"""

import json
import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "BankEntries"

T = TypeVar("T")


def find_entries(body: str) -> Optional[Tuple[str, List[Any]]]:
    """
    Find the entries array in a JSON report body.

    A top-level array is returned under DEFAULT_SHEET_NAME; for an object,
    the first array-valued property wins and its name is returned.

    Raises:
        json.JSONDecodeError: If body is not JSON
    """
    data = json.loads(body)
    if isinstance(data, list):
        return DEFAULT_SHEET_NAME, data
    if isinstance(data, dict):
        for name, value in data.items():
            if isinstance(value, list):
                return name, value
    return None


def route_response(body: str, exporter: Callable[[List[Any], str], T]) -> Optional[T]:
    """Pass the entries array to exporter(entries, name); None when there is nothing to export"""
    try:
        found = find_entries(body)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON: {e}")
        return None

    if found is None:
        logger.warning("No entries array in response")
        return None

    name, entries = found
    return exporter(entries, name)
