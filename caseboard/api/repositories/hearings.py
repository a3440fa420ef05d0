"""
hearings.py - Hearing repository
Single responsibility: fetch scheduled hearings, depositions and meetings.
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Hearing
from caseboard.domain.results import Result


def list_hearings(session: ApiSession) -> Result:
    return fetch_records(session, "/hearings", "hearings", Hearing.from_dict)
