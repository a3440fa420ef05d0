"""
filter_service.py - Filter helpers and presets
Single responsibility: build FilterState values and keep saved presets per screen.
"""
from dataclasses import dataclass

from caseboard.config import FILTER_PRESET_LIMIT
from caseboard.domain.filters import ALL, FilterState, SortState
from caseboard.utils.time import now_iso


def build_filter(search: str = "", **values: str | None) -> FilterState:
    return FilterState(
        search=search or "",
        values={name: (value or ALL) for name, value in values.items()},
    )


@dataclass(frozen=True)
class FilterPreset:
    filter_state: FilterState
    sort_state: SortState
    saved_at: str


# screen name -> presets, most recent first
_presets: dict[str, list[FilterPreset]] = {}


def save_preset(screen: str, filter_state: FilterState, sort_state: SortState) -> FilterPreset:
    preset = FilterPreset(
        filter_state=FilterState(search=filter_state.search, values=dict(filter_state.values)),
        sort_state=SortState(key=sort_state.key),
        saved_at=now_iso(),
    )
    presets = _presets.setdefault(screen, [])
    presets.insert(0, preset)
    del presets[FILTER_PRESET_LIMIT:]
    return preset


def load_preset(screen: str) -> FilterPreset | None:
    presets = _presets.get(screen)
    return presets[0] if presets else None


def list_presets(screen: str) -> list[FilterPreset]:
    return list(_presets.get(screen, []))


def clear_presets(screen: str | None = None) -> None:
    if screen is None:
        _presets.clear()
    else:
        _presets.pop(screen, None)
