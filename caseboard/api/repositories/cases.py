"""
cases.py - Case repository
Single responsibility: fetch cases from the marketplace API.
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Case
from caseboard.domain.results import Result


def list_cases(session: ApiSession) -> Result:
    return fetch_records(session, "/cases", "cases", Case.from_dict)
