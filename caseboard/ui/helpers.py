"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from dataclasses import dataclass, field
from typing import Any

from caseboard.config import COLOR_ACTIVE, COLOR_CLOSED, COLOR_DANGER, COLOR_PENDING, COLOR_TEXT_MUTED
from caseboard.domain.listing import ListView
from caseboard.domain.models import Case, Client, Document, Hearing, Notification, Order, RateCard
from caseboard.utils.time import parse_timestamp

_ACTIVE_STATUSES = {
    "active",
    "open",
    "in_progress",
    "funded",
    "delivered",
    "approved",
    "processed",
    "scheduled",
    "confirmed",
    "unread",
}
_PENDING_STATUSES = {"pending", "created", "postponed"}
_FAILED_STATUSES = {"disputed", "rejected", "cancelled", "refunded", "inactive"}
_DONE_STATUSES = {"closed", "resolved", "completed"}

_CURRENCY_SYMBOLS = {"inr": "₹", "usd": "$"}


def format_datetime(value: Any, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM" (UTC); raw text when unparseable."""
    if not isinstance(value, str) or not value:
        return ""
    dt = parse_timestamp(value)
    return dt.strftime(fmt) if dt else value


def format_date(value: Any) -> str:
    return format_datetime(value, "%Y-%m-%d")


def status_label(status: Any) -> str:
    if status is None or status == "":
        return "-"
    return str(status).replace("_", " ").capitalize()


def status_color(status: Any) -> str:
    key = str(status or "").lower()
    if key in _ACTIVE_STATUSES:
        return COLOR_ACTIVE
    if key in _PENDING_STATUSES:
        return COLOR_PENDING
    if key in _FAILED_STATUSES:
        return COLOR_DANGER
    if key in _DONE_STATUSES:
        return COLOR_CLOSED
    return COLOR_TEXT_MUTED


def format_amount(amount_cents: int | None, currency: str | None = "inr") -> str:
    symbol = _CURRENCY_SYMBOLS.get((currency or "").lower(), "")
    amount = (amount_cents or 0) / 100
    text = f"{symbol}{amount:,.2f}"
    return text if symbol else f"{text} {(currency or '').upper()}".rstrip()


def page_summary(view: ListView) -> str:
    """e.g. "Page 2 / 3  ・  7-12 of 13 items"."""
    noun = "item" if view.total_items == 1 else "items"
    if not view.total_items:
        return f"Page {view.page} / {view.total_pages}  ・  0 items"
    return (
        f"Page {view.page} / {view.total_pages}  ・  "
        f"{view.first_index}-{view.last_index} of {view.total_items} {noun}"
    )


@dataclass
class RecordSummary:
    title: str
    meta: list[str] = field(default_factory=list)
    status: str = ""
    badges: list[str] = field(default_factory=list)
    progress: int | None = None


def describe_record(record) -> RecordSummary:
    """Map any list record to the text shown on its card."""
    if isinstance(record, Case):
        meta = [record.case_number or f"#{record.id}"]
        if record.client_name:
            meta.append(f"Client: {record.client_name}")
        if record.next_hearing:
            meta.append(f"Next hearing: {format_datetime(record.next_hearing)}")
        updated = format_datetime(record.updated_at or record.created_at)
        if updated:
            meta.append(f"Updated {updated}")
        return RecordSummary(
            title=record.title,
            meta=meta,
            status=record.status,
            badges=[b for b in (record.priority, record.case_type) if b],
            progress=record.progress,
        )
    if isinstance(record, Client):
        meta = [record.email] if record.email else []
        if record.case_count:
            meta.append(f"{record.case_count} cases")
        return RecordSummary(title=record.name, meta=meta, status=record.status)
    if isinstance(record, Document):
        meta = [record.type] if record.type else []
        if record.uploaded_at:
            meta.append(f"Uploaded {format_datetime(record.uploaded_at)}")
        return RecordSummary(title=record.name, meta=meta, status=record.status)
    if isinstance(record, Order):
        meta = [format_amount(record.amount_cents, record.currency)]
        if record.case_number:
            meta.append(record.case_number)
        if record.client_name:
            meta.append(f"Client: {record.client_name}")
        if record.lawyer_name:
            meta.append(f"Lawyer: {record.lawyer_name}")
        return RecordSummary(
            title=record.title or f"Order {record.id}",
            meta=meta,
            status=record.status,
        )
    if isinstance(record, RateCard):
        meta = [
            record.practice_area.replace("_", " "),
            f"Base rate {record.base_rate:,.0f}",
            f"Rating {record.average_rating:.1f}",
            f"{record.total_bookings} bookings",
        ]
        return RecordSummary(
            title=record.title,
            meta=[m for m in meta if m],
            status=record.availability,
            badges=[record.service_type] if record.service_type else [],
        )
    if isinstance(record, Hearing):
        when = " ".join(p for p in (format_date(record.date), record.time) if p)
        meta = [m for m in (when, record.location, record.case_number or record.case_title) if m]
        badges = [record.type] if record.type else []
        if record.is_virtual:
            badges.append("virtual")
        return RecordSummary(title=record.title, meta=meta, status=record.status, badges=badges)
    if isinstance(record, Notification):
        meta = [record.message] if record.message else []
        if record.case_title:
            meta.append(f"Case: {record.case_title}")
        created = format_datetime(record.created_at)
        if created:
            meta.append(created)
        badges = [b for b in (record.type, record.priority) if b]
        if record.action_required:
            badges.append("action required")
        return RecordSummary(title=record.title, meta=meta, status=record.read_state, badges=badges)
    return RecordSummary(title=str(record))
