"""
notifications.py - Notification repository
Single responsibility: fetch the signed-in user's notifications.
"""

from caseboard import config
from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Notification
from caseboard.domain.results import Result


def list_notifications(session: ApiSession) -> Result:
    # the endpoint pages server-side (20 per page by default); take one large page
    return fetch_records(
        session,
        "/notifications",
        "notifications",
        Notification.from_dict,
        params={"limit": config.NOTIFICATION_FETCH_LIMIT},
    )
