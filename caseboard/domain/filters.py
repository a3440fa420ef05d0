"""
filters.py - List view state DTOs
Single responsibility: carry search/filter, sort and page inputs for list views.
"""
from dataclasses import dataclass, field

# Sentinel filter value meaning "no constraint"
ALL = "all"


def is_active_value(value: str | None) -> bool:
    return bool(value) and value != ALL


@dataclass
class FilterState:
    search: str = ""
    values: dict[str, str] = field(default_factory=dict)

    def value(self, name: str) -> str:
        return self.values.get(name) or ALL

    def active(self) -> dict[str, str]:
        """Return only the filters that constrain the result."""
        return {k: v for k, v in self.values.items() if is_active_value(v)}

    def is_default(self) -> bool:
        return not self.search.strip() and not self.active()


@dataclass
class SortState:
    key: str = ""


@dataclass
class PageState:
    page: int = 1
    page_size: int = 10
