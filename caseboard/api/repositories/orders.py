"""
orders.py - Order repository
Single responsibility: fetch escrow orders for display.
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Order
from caseboard.domain.results import Result


def list_orders(session: ApiSession) -> Result:
    return fetch_records(session, "/orders", "orders", Order.from_dict)
