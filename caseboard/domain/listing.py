"""
listing.py - List view controller
Single responsibility: derive the visible page of a record collection from
search/filter, sort and page inputs.

Every list screen (cases, clients, documents, orders, rate cards, hearings,
notifications) shares this module; a screen only supplies a ListViewSpec
describing which fields are searched, which categorical filters exist and
which sort orders it offers.
"""
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Optional

from caseboard.domain.filters import ALL, FilterState, PageState, SortState, is_active_value

logger = logging.getLogger(__name__)

FieldRef = str | Callable[[Any], Any]


def resolve_field(record: Any, ref: FieldRef) -> Any:
    """
    Read a field from a record.

    ``ref`` is either a callable or a (dotted) name looked up as a mapping key
    first and an attribute second. Missing fields read as None.
    """
    if callable(ref):
        return ref(record)
    value = record
    for part in ref.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


@dataclass(frozen=True)
class FilterField:
    name: str
    field: FieldRef
    label: str = ""
    options: tuple[tuple[str, str], ...] = ()
    # filter value -> raw values it accepts (e.g. "active" -> pending/in_progress)
    groups: dict[str, tuple[Any, ...]] = field(default_factory=dict)

    def matches(self, record: Any, selected: str | None) -> bool:
        if not is_active_value(selected):
            return True
        raw = resolve_field(record, self.field)
        accepted = self.groups.get(selected)
        if accepted is not None:
            return raw in accepted
        return raw == selected


@dataclass(frozen=True)
class SortOrder:
    key: Callable[[Any], Any]
    reverse: bool = False
    label: str = ""

    def apply(self, records: list) -> list:
        """Stable sort; records without a sort value keep input order at the end."""
        keyed = [(self.key(r), r) for r in records]
        present = [(k, r) for k, r in keyed if k is not None]
        missing = [r for k, r in keyed if k is None]
        present.sort(key=lambda pair: pair[0], reverse=self.reverse)
        return [r for _, r in present] + missing


@dataclass(frozen=True)
class ListViewSpec:
    name: str
    search_fields: tuple[FieldRef, ...] = ()
    filters: tuple[FilterField, ...] = ()
    sort_orders: dict[str, SortOrder] = field(default_factory=dict)
    default_sort: str = ""
    page_size: int = 10
    title: str = ""

    def filter_field(self, name: str) -> Optional[FilterField]:
        return next((f for f in self.filters if f.name == name), None)

    def matches_search(self, record: Any, query: str) -> bool:
        needle = (query or "").strip().casefold()
        if not needle:
            return True
        for ref in self.search_fields:
            value = resolve_field(record, ref)
            if value is None:
                continue
            if needle in str(value).casefold():
                return True
        return False

    def matches(self, record: Any, filter_state: FilterState) -> bool:
        if not self.matches_search(record, filter_state.search):
            return False
        for name, selected in filter_state.active().items():
            ff = self.filter_field(name)
            if ff is None:
                continue
            if not ff.matches(record, selected):
                return False
        return True

    def sort(self, records: list, key: str | None) -> list:
        order = self.sort_orders.get(key or "")
        if order is None:
            return list(records)
        return order.apply(records)


@dataclass(frozen=True)
class ListView:
    page_items: list
    page: int
    page_size: int
    total_pages: int
    total_items: int
    has_next: bool
    has_prev: bool

    @property
    def first_index(self) -> int:
        """1-based index of the first item on the page (0 when empty)."""
        if not self.page_items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.page_items:
            return 0
        return self.first_index + len(self.page_items) - 1


def clamp_page(page: Any, total_pages: int) -> int:
    try:
        page = int(page)
    except (TypeError, ValueError):
        page = 1
    return min(max(1, page), max(1, total_pages))


def compute_view(
    spec: ListViewSpec,
    records: Iterable | None,
    filter_state: FilterState | None = None,
    sort_state: SortState | None = None,
    page_state: PageState | None = None,
) -> ListView:
    records = list(records or [])
    filter_state = filter_state or FilterState()
    sort_state = sort_state or SortState(key=spec.default_sort)
    page_state = page_state or PageState(page_size=spec.page_size)

    matched = [r for r in records if spec.matches(r, filter_state)]
    ordered = spec.sort(matched, sort_state.key)

    page_size = page_state.page_size if (page_state.page_size or 0) > 0 else spec.page_size
    page_size = max(1, page_size)
    total_items = len(ordered)
    total_pages = max(1, math.ceil(total_items / page_size))
    page = clamp_page(page_state.page, total_pages)
    start = (page - 1) * page_size

    return ListView(
        page_items=ordered[start : start + page_size],
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


class ListViewController:
    """
    Owns the filter/sort/page state of one list screen.

    The view is recomputed from scratch on every access. Any change to the
    search text, a filter or the sort key sends the user back to page 1.
    """

    def __init__(
        self,
        spec: ListViewSpec,
        records: Iterable | None = None,
        on_change: Callable[[], None] | None = None,
    ):
        self.spec = spec
        self.on_change = on_change
        self._records: list = list(records or [])
        self.filter_state = FilterState()
        self.sort_state = SortState()
        self.page_state = PageState()
        self.reset(notify=False)

    @property
    def records(self) -> tuple:
        return tuple(self._records)

    @property
    def view(self) -> ListView:
        return compute_view(
            self.spec, self._records, self.filter_state, self.sort_state, self.page_state
        )

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    def reset(self, notify: bool = True) -> None:
        self.filter_state = FilterState(values={f.name: ALL for f in self.spec.filters})
        self.sort_state = SortState(key=self.spec.default_sort)
        self.page_state = PageState(page=1, page_size=self.spec.page_size)
        if notify:
            self._changed()

    def set_records(self, records: Iterable | None) -> None:
        self._records = list(records or [])
        # keep the current page if it still exists
        self.page_state.page = clamp_page(self.page_state.page, self.view.total_pages)
        self._changed()

    def set_search(self, text: str | None) -> None:
        self.filter_state = replace(self.filter_state, search=text or "")
        self.page_state.page = 1
        self._changed()

    def set_filter(self, name: str, value: str | None) -> None:
        if self.spec.filter_field(name) is None:
            raise ValueError(f"Unknown filter for {self.spec.name}: {name}")
        values = dict(self.filter_state.values)
        values[name] = value or ALL
        self.filter_state = replace(self.filter_state, values=values)
        self.page_state.page = 1
        self._changed()

    def set_sort(self, key: str | None) -> None:
        if key and key not in self.spec.sort_orders:
            logger.debug("Unknown sort key %r for %s; keeping input order", key, self.spec.name)
        self.sort_state = SortState(key=key or "")
        self.page_state.page = 1
        self._changed()

    def restore(self, filter_state: FilterState, sort_state: SortState) -> None:
        """Apply a saved filter/sort pair (e.g. a preset) in one step."""
        values = {f.name: ALL for f in self.spec.filters}
        values.update(
            {k: v for k, v in filter_state.values.items() if self.spec.filter_field(k)}
        )
        self.filter_state = FilterState(search=filter_state.search, values=values)
        self.sort_state = SortState(key=sort_state.key)
        self.page_state.page = 1
        self._changed()

    def go_to_page(self, page: Any) -> int:
        self.page_state.page = clamp_page(page, self.view.total_pages)
        self._changed()
        return self.page_state.page

    def next_page(self) -> int:
        return self.go_to_page(self.page_state.page + 1)

    def prev_page(self) -> int:
        return self.go_to_page(self.page_state.page - 1)
