"""
list_specs.py - Per-screen list definitions
Single responsibility: declare searched fields, filters and sort orders for
every list screen so they all share one ListViewController.
"""
from caseboard import config
from caseboard.domain.comparators import by_date, by_number, by_rank, by_text
from caseboard.domain.filters import ALL
from caseboard.domain.listing import FilterField, ListViewSpec

CASE_STATUS_GROUPS = {
    "active": ("active", "in_progress", "open"),
    "pending": ("pending",),
    "closed": ("closed", "resolved", "completed"),
}

ORDER_STATUS_GROUPS = {
    "active": ("funded", "in_progress", "delivered"),
    "created": ("created",),
    "completed": ("completed",),
    "disputed": ("disputed",),
    "closed": ("refunded", "cancelled"),
}

HEARING_STATUS_GROUPS = {
    "upcoming": ("scheduled", "confirmed"),
    "postponed": ("postponed",),
    "completed": ("completed",),
    "cancelled": ("cancelled",),
}


CASES = ListViewSpec(
    name="cases",
    title="Cases",
    search_fields=("title", "client_name", "case_number"),
    filters=(
        FilterField(
            name="status",
            field="status",
            label="Status",
            options=((ALL, "All"), ("active", "Active"), ("pending", "Pending"), ("closed", "Closed")),
            groups=CASE_STATUS_GROUPS,
        ),
        FilterField(
            name="priority",
            field="priority",
            label="Priority",
            options=(
                (ALL, "All"),
                ("urgent", "Urgent"),
                ("high", "High"),
                ("medium", "Medium"),
                ("low", "Low"),
            ),
        ),
    ),
    sort_orders={
        "recent": by_date("updated_at", label="Most recent"),
        "priority": by_rank("priority", label="Priority"),
        "progress": by_number("progress", label="Progress"),
        "name": by_text("title", label="Name"),
    },
    default_sort="recent",
    page_size=config.CASES_PAGE_SIZE,
)

CLIENTS = ListViewSpec(
    name="clients",
    title="Clients",
    search_fields=("name", "email"),
    filters=(
        FilterField(
            name="status",
            field="status",
            label="Status",
            options=((ALL, "All"), ("Active", "Active"), ("Inactive", "Inactive")),
        ),
    ),
    sort_orders={
        "name": by_text("name", label="Name"),
        "cases": by_number("case_count", label="Most cases"),
    },
    default_sort="name",
    page_size=config.DEFAULT_PAGE_SIZE,
)

DOCUMENTS = ListViewSpec(
    name="documents",
    title="Documents",
    search_fields=("name", "type"),
    filters=(
        FilterField(
            name="status",
            field="status",
            label="Status",
            options=(
                (ALL, "All"),
                ("pending", "Pending"),
                ("processed", "Processed"),
                ("approved", "Approved"),
                ("rejected", "Rejected"),
            ),
        ),
    ),
    sort_orders={
        "recent": by_date("uploaded_at", label="Most recent"),
        "name": by_text("name", label="Name"),
    },
    default_sort="recent",
    page_size=config.DOCUMENTS_PAGE_SIZE,
)

ORDERS = ListViewSpec(
    name="orders",
    title="Orders",
    search_fields=("title", "client_name", "lawyer_name", "case_number"),
    filters=(
        FilterField(
            name="status",
            field="status",
            label="Status",
            options=(
                (ALL, "All"),
                ("active", "In escrow"),
                ("created", "Awaiting payment"),
                ("completed", "Completed"),
                ("disputed", "Disputed"),
                ("closed", "Refunded / cancelled"),
            ),
            groups=ORDER_STATUS_GROUPS,
        ),
    ),
    sort_orders={
        "recent": by_date("created_at", label="Most recent"),
        "amount": by_number("amount_cents", label="Amount"),
    },
    default_sort="recent",
    page_size=config.DEFAULT_PAGE_SIZE,
)

RATE_CARDS = ListViewSpec(
    name="rate_cards",
    title="Rate cards",
    search_fields=("title", "practice_area"),
    filters=(
        FilterField(
            name="status",
            field="availability",
            label="Status",
            options=((ALL, "All"), ("active", "Active"), ("inactive", "Inactive")),
        ),
        FilterField(
            name="service_type",
            field="service_type",
            label="Service",
            options=(
                (ALL, "All"),
                ("hourly", "Hourly"),
                ("fixed", "Fixed fee"),
                ("consultation", "Consultation"),
                ("retainer", "Retainer"),
                ("contingency", "Contingency"),
                ("court_appearance", "Court appearance"),
                ("document_drafting", "Drafting"),
            ),
        ),
    ),
    sort_orders={
        "rating": by_number("average_rating", label="Best rated"),
        "price_low": by_number("base_rate", descending=False, label="Price: low to high"),
        "price_high": by_number("base_rate", label="Price: high to low"),
        "bookings": by_number("total_bookings", label="Most booked"),
    },
    default_sort="rating",
    page_size=config.RATE_CARDS_PAGE_SIZE,
)

HEARINGS = ListViewSpec(
    name="hearings",
    title="Schedule",
    search_fields=("title", "case_title", "case_number", "location"),
    filters=(
        FilterField(
            name="status",
            field="status",
            label="Status",
            options=(
                (ALL, "All"),
                ("upcoming", "Upcoming"),
                ("postponed", "Postponed"),
                ("completed", "Completed"),
                ("cancelled", "Cancelled"),
            ),
            groups=HEARING_STATUS_GROUPS,
        ),
        FilterField(
            name="type",
            field="type",
            label="Type",
            options=(
                (ALL, "All"),
                ("hearing", "Hearing"),
                ("deposition", "Deposition"),
                ("meeting", "Meeting"),
                ("conference", "Conference"),
                ("trial", "Trial"),
            ),
        ),
    ),
    sort_orders={
        "soonest": by_date("date", newest_first=False, label="Soonest first"),
        "latest": by_date("date", label="Latest first"),
        "name": by_text("title", label="Name"),
    },
    default_sort="soonest",
    page_size=config.HEARINGS_PAGE_SIZE,
)

NOTIFICATIONS = ListViewSpec(
    name="notifications",
    title="Notifications",
    search_fields=("title", "message", "case_title"),
    filters=(
        FilterField(
            name="read",
            field="read_state",
            label="Read",
            options=((ALL, "All"), ("unread", "Unread"), ("read", "Read")),
        ),
        FilterField(
            name="type",
            field="type",
            label="Type",
            options=(
                (ALL, "All"),
                ("deadline", "Deadline"),
                ("court", "Court"),
                ("message", "Message"),
                ("document", "Document"),
                ("payment", "Payment"),
                ("verification", "Verification"),
                ("system", "System"),
            ),
        ),
        FilterField(
            name="priority",
            field="priority",
            label="Priority",
            options=(
                (ALL, "All"),
                ("urgent", "Urgent"),
                ("high", "High"),
                ("medium", "Medium"),
                ("low", "Low"),
            ),
        ),
    ),
    sort_orders={
        "recent": by_date("created_at", label="Most recent"),
        "priority": by_rank("priority", label="Priority"),
    },
    default_sort="recent",
    page_size=config.NOTIFICATIONS_PAGE_SIZE,
)

SCREENS: tuple[ListViewSpec, ...] = (
    CASES,
    CLIENTS,
    DOCUMENTS,
    ORDERS,
    RATE_CARDS,
    HEARINGS,
    NOTIFICATIONS,
)

_BY_NAME = {spec.name: spec for spec in SCREENS}


def get_spec(name: str) -> ListViewSpec:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown list screen: {name}") from None
