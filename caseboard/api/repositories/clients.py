"""
clients.py - Client repository
Single responsibility: fetch the lawyer's clients.
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Client
from caseboard.domain.results import Result


def list_clients(session: ApiSession) -> Result:
    return fetch_records(session, "/payment-requests/clients", "clients", Client.from_dict)
