"""
base.py - Shared repository helper
Single responsibility: fetch a list endpoint and validate each item into a model.
"""

import logging
from typing import Callable, TypeVar

from caseboard.api.connection import ApiSession, extract_list
from caseboard.domain.results import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_records(
    session: ApiSession,
    path: str,
    key: str,
    parse: Callable[[dict], T],
    params: dict | None = None,
) -> Result:
    result = session.get_json(path, params=params)
    if isinstance(result, Err):
        return result
    items = extract_list(result.data, key)
    if isinstance(items, Err):
        logger.warning("%s: %s", path, items.reason)
        return items

    records: list[T] = []
    for raw in items.data:
        try:
            records.append(parse(raw))
        except ValueError as e:
            # one malformed row should not hide the rest of the list
            logger.debug("Skipping item from %s: %s", path, e)
    return Ok(records)
