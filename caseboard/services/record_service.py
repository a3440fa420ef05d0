"""
record_service.py - Record loading per screen
Single responsibility: dispatch a screen to its repository and keep the last
good result so a failed refresh never blanks the list.
"""
import logging
from typing import Callable

from caseboard.api.connection import ApiSession
from caseboard.api.repositories import (
    cases,
    clients,
    documents,
    hearings,
    notifications,
    orders,
    rate_cards,
)
from caseboard.domain.results import Err, Ok, Result
from caseboard.utils.time import now_iso

logger = logging.getLogger(__name__)

_LOADERS: dict[str, Callable[[ApiSession], Result]] = {
    "cases": cases.list_cases,
    "clients": clients.list_clients,
    "documents": documents.list_documents,
    "orders": orders.list_orders,
    "rate_cards": rate_cards.list_rate_cards,
    "hearings": hearings.list_hearings,
    "notifications": notifications.list_notifications,
}

_cache: dict[str, list] = {}
_fetched_at: dict[str, str] = {}


def load(session: ApiSession, screen: str) -> Result:
    loader = _LOADERS.get(screen)
    if loader is None:
        raise KeyError(f"No loader for screen: {screen}")
    result = loader(session)
    if isinstance(result, Ok):
        _cache[screen] = list(result.data)
        _fetched_at[screen] = now_iso()
        logger.info("Loaded %d %s", len(result.data), screen)
    elif isinstance(result, Err):
        logger.warning("Failed to load %s: %s", screen, result)
    return result


def cached(screen: str) -> list:
    return list(_cache.get(screen, []))


def fetched_at(screen: str) -> str | None:
    return _fetched_at.get(screen)


def clear_cache() -> None:
    _cache.clear()
    _fetched_at.clear()
