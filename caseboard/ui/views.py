"""
views.py - UI view builders
Single responsibility: build flet Views from AppState and the list controllers.
"""

import asyncio

import flet as ft

from caseboard.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_PRIMARY,
    COLOR_DANGER,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    BORDER_RADIUS_BTN,
    SHADOW_ELEVATION,
    SEARCH_DEBOUNCE_SECONDS,
)
from caseboard.domain.listing import ListViewController
from caseboard.services import record_service
from caseboard.services.list_specs import SCREENS
from caseboard.ui.components.pagination_bar import PaginationBar
from caseboard.ui.components.record_card import RecordCard
from caseboard.ui.helpers import format_datetime

SCREEN_ICONS = {
    "cases": ft.Icons.GAVEL,
    "clients": ft.Icons.PEOPLE,
    "documents": ft.Icons.DESCRIPTION,
    "orders": ft.Icons.RECEIPT_LONG,
    "rate_cards": ft.Icons.SELL,
    "hearings": ft.Icons.EVENT,
    "notifications": ft.Icons.NOTIFICATIONS,
}


def build_appbar(on_refresh) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.IconButton(
                icon=ft.Icons.REFRESH,
                tooltip="Reload from server",
                on_click=lambda e: on_refresh(),
            ),
            ft.Container(width=16),
        ],
    )


def _chip(label: str, selected: bool, on_click) -> ft.Container:
    color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
    return ft.Container(
        content=ft.Text(
            label,
            size=13,
            color="white" if selected else color,
            weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
        ),
        bgcolor=COLOR_PRIMARY if selected else COLOR_CARD,
        border=ft.border.all(1, color),
        border_radius=14,
        padding=ft.Padding.symmetric(horizontal=12, vertical=4),
        on_click=lambda _: on_click(),
        ink=True,
    )


def _chip_row(title: str, chips: list[ft.Control]) -> ft.Row:
    return ft.Row(
        controls=[
            ft.Container(
                content=ft.Text(title, size=12, color=COLOR_TEXT_MUTED),
                width=70,
            ),
            *chips,
        ],
        spacing=6,
        run_spacing=6,
        wrap=True,
    )


def _empty_placeholder(has_constraints: bool) -> ft.Container:
    message = "No records match the current filters" if has_constraints else "Nothing here yet"
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=64, color="#d0d7de"),
                ft.Text(message, color=COLOR_TEXT_MUTED, size=16),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=60,
        expand=True,
    )


def build_screen_tabs(current: str, on_select_screen) -> ft.Row:
    def build_tab_btn(spec):
        selected = current == spec.name
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Row(
                [
                    ft.Icon(SCREEN_ICONS.get(spec.name, ft.Icons.LIST), color=color, size=18),
                    ft.Text(
                        spec.title,
                        color=color,
                        weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
                    ),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
                spacing=8,
            ),
            padding=ft.Padding.symmetric(vertical=12, horizontal=24),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
            ),
            on_click=lambda _, name=spec.name: on_select_screen(name),
            ink=True,
            animate=ft.Animation(200, "easeOut"),
            border_radius=ft.border_radius.only(top_left=6, top_right=6),
        )

    return ft.Row(
        controls=[build_tab_btn(spec) for spec in SCREENS],
        spacing=0,
        wrap=True,
        alignment=ft.MainAxisAlignment.START,
    )


def build_list_view(
    page: ft.Page,
    state,
    on_select_screen,
    on_refresh,
    on_rebuild,
    on_save_preset,
    on_load_preset,
    on_clear_filter,
    on_select_record=None,
) -> ft.View:
    controller: ListViewController = state.controller
    spec = controller.spec
    search_task: asyncio.Task | None = None

    # Reference to the card column for in-place updates (search, paging)
    list_column_ref = ft.Ref[ft.Column]()
    pager_ref = ft.Ref[ft.Container]()

    def build_cards(view) -> list[ft.Control]:
        if not view.page_items:
            return [_empty_placeholder(not controller.filter_state.is_default())]
        return [RecordCard(record, on_select_record) for record in view.page_items]

    def build_pager(view) -> PaginationBar:
        return PaginationBar(
            view,
            on_prev=lambda: go(controller.prev_page),
            on_next=lambda: go(controller.next_page),
            on_first=lambda: go(lambda: controller.go_to_page(1)),
            on_last=lambda: go(lambda: controller.go_to_page(view.total_pages)),
        )

    def update_list_inplace():
        """Update only the cards and pager without rebuilding the whole view."""
        view = controller.view
        col = list_column_ref.current
        pager = pager_ref.current
        if col is None or pager is None:
            on_rebuild()
            return
        col.controls = build_cards(view)
        pager.content = build_pager(view)
        col.update()
        pager.update()

    def go(step):
        step()
        update_list_inplace()

    async def _debounced_search(term_snapshot: str):
        # Debounce to avoid recomputing the list on every keystroke
        try:
            await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        except asyncio.CancelledError:
            return
        if term_snapshot == (search_field.value or ""):
            controller.set_search(term_snapshot)
            update_list_inplace()

    def on_search(e):
        nonlocal search_task
        term = e.control.value or ""
        if search_task and not search_task.done():
            search_task.cancel()

        async def runner(snapshot: str):
            await _debounced_search(snapshot)

        search_task = page.run_task(runner, term)

    def on_filter_click(name: str, value: str):
        controller.set_filter(name, value)
        on_rebuild()

    def on_sort_click(key: str):
        controller.set_sort(key)
        on_rebuild()

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text=f"Search {spec.title.lower()}...",
        value=controller.filter_state.search,
        on_change=on_search,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
    )

    filter_rows = []
    for ff in spec.filters:
        selected = controller.filter_state.value(ff.name)
        filter_rows.append(
            _chip_row(
                ff.label or ff.name,
                [
                    _chip(
                        label,
                        selected == value,
                        lambda name=ff.name, value=value: on_filter_click(name, value),
                    )
                    for value, label in ff.options
                ],
            )
        )

    sort_row = _chip_row(
        "Sort",
        [
            _chip(
                order.label or key,
                controller.sort_state.key == key,
                lambda key=key: on_sort_click(key),
            )
            for key, order in spec.sort_orders.items()
        ],
    )

    actions_row = ft.Row(
        controls=[
            ft.OutlinedButton(
                "Save filter",
                icon=ft.Icons.SAVE,
                on_click=lambda e: on_save_preset(),
            ),
            ft.OutlinedButton(
                "Load last",
                icon=ft.Icons.DOWNLOAD,
                on_click=lambda e: on_load_preset(),
            ),
            ft.TextButton(
                "Clear",
                icon=ft.Icons.CLEAR,
                on_click=lambda e: on_clear_filter(),
            ),
        ],
        spacing=8,
        wrap=True,
        run_spacing=8,
        alignment=ft.MainAxisAlignment.END,
    )

    status_controls: list[ft.Control] = []
    fetched = record_service.fetched_at(spec.name)
    if fetched:
        status_controls.append(
            ft.Text(f"Updated {format_datetime(fetched)}", size=12, color=COLOR_TEXT_MUTED)
        )
    error = state.last_error.get(spec.name)
    if error:
        status_controls.append(
            ft.Row(
                controls=[
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color=COLOR_DANGER, size=16),
                    ft.Text(error, size=12, color=COLOR_DANGER),
                    ft.TextButton("Retry", on_click=lambda e: on_refresh()),
                ],
                spacing=6,
            )
        )

    view = controller.view
    return ft.View(
        route="/",
        appbar=build_appbar(on_refresh),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            build_screen_tabs(state.current_screen, on_select_screen),
            ft.ResponsiveRow(
                controls=[
                    ft.Container(content=search_field, col={"xs": 12, "md": 7}),
                    ft.Container(
                        content=actions_row,
                        col={"xs": 12, "md": 5},
                        alignment=ft.Alignment.CENTER_RIGHT,
                    ),
                ],
                spacing=12,
                run_spacing=12,
            ),
            *filter_rows,
            sort_row,
            *status_controls,
            ft.Column(ref=list_column_ref, controls=build_cards(view), spacing=0),
            ft.Container(ref=pager_ref, content=build_pager(view)),
        ],
    )
