"""
documents.py - Document repository
Single responsibility: fetch document metadata (never file contents).
"""

from caseboard.api.connection import ApiSession
from caseboard.api.repositories.base import fetch_records
from caseboard.domain.models import Document
from caseboard.domain.results import Result


def list_documents(session: ApiSession) -> Result:
    return fetch_records(session, "/documents/my-documents", "documents", Document.from_dict)
