"""Pytest configuration and fixtures."""

import pytest

from caseboard.domain.listing import FilterField, ListViewSpec
from caseboard.domain.comparators import by_date, by_number, by_rank, by_text
from caseboard.domain.filters import ALL
from caseboard.domain.models import Case
from caseboard.services import filter_service, record_service


@pytest.fixture(autouse=True)
def _reset_module_state():
    """Service modules keep caches at module level; isolate every test."""
    record_service.clear_cache()
    filter_service.clear_presets()
    yield
    record_service.clear_cache()
    filter_service.clear_presets()


@pytest.fixture
def plain_spec():
    """A small list definition over plain dict records."""
    return ListViewSpec(
        name="plain",
        search_fields=("title", "client.name"),
        filters=(
            FilterField(name="status", field="status", options=((ALL, "All"),)),
            FilterField(name="priority", field="priority"),
        ),
        sort_orders={
            "recent": by_date("created_at"),
            "priority": by_rank("priority"),
            "progress": by_number("progress"),
            "name": by_text("title"),
        },
        default_sort="",
        page_size=6,
    )


@pytest.fixture
def thirteen_records():
    """7 active, 4 pending, 2 closed, interleaved."""
    statuses = ["active"] * 7 + ["pending"] * 4 + ["closed"] * 2
    order = [0, 7, 1, 11, 2, 8, 3, 12, 4, 9, 5, 10, 6]
    return [
        {"id": i, "title": f"Matter {i}", "status": statuses[idx], "priority": "low"}
        for i, idx in enumerate(order)
    ]


@pytest.fixture
def sample_cases():
    return [
        Case(
            id="c1",
            title="Smith v. Jones",
            case_number="CASE-2024-0001",
            status="in_progress",
            priority="high",
            progress=40,
            client_name="Alice Smith",
            updated_at="2024-03-01T10:00:00Z",
        ),
        Case(
            id="c2",
            title="Doe Estate",
            case_number="CASE-2024-0002",
            status="pending",
            priority="low",
            progress=0,
            client_name="John Doe",
            updated_at="2024-03-05T09:00:00Z",
        ),
        Case(
            id="c3",
            title="smith Contract",
            case_number="CASE-2024-0003",
            status="resolved",
            priority="urgent",
            progress=100,
            client_name="Bob Brown",
            updated_at="2024-02-20T12:30:00Z",
        ),
        Case(
            id="c4",
            title="Acme Merger",
            case_number="CASE-2024-0004",
            status="open",
            priority="medium",
            progress=75,
            client_name="Acme Ltd",
            updated_at=None,
        ),
    ]
