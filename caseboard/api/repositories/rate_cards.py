"""
rate_cards.py - Rate card repository
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import RateCard
from caseboard.domain.results import Result


def list_rate_cards(session: ApiSession) -> Result:
    return fetch_records(session, "/rate-cards/lawyer", "data", RateCard.from_dict)
