import flet as ft
from caseboard.config import (
    COLOR_CARD,
    COLOR_BORDER,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
)
from caseboard.domain.listing import ListView
from caseboard.ui.helpers import page_summary


class PaginationBar(ft.Container):
    def __init__(self, view: ListView, on_prev, on_next, on_first=None, on_last=None):
        super().__init__()
        self.view = view
        self.on_prev = on_prev
        self.on_next = on_next
        self.on_first = on_first
        self.on_last = on_last

        self.padding = ft.Padding.symmetric(horizontal=14, vertical=6)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.content = self._build_content()

    def _build_content(self):
        view = self.view
        return ft.Row(
            controls=[
                ft.IconButton(
                    icon=ft.Icons.FIRST_PAGE,
                    tooltip="First page",
                    disabled=not view.has_prev or self.on_first is None,
                    on_click=lambda e: self.on_first(),
                ),
                ft.IconButton(
                    icon=ft.Icons.CHEVRON_LEFT,
                    tooltip="Previous page",
                    disabled=not view.has_prev,
                    on_click=lambda e: self.on_prev(),
                ),
                ft.Text(
                    page_summary(view),
                    size=13,
                    color=COLOR_TEXT_MUTED,
                ),
                ft.IconButton(
                    icon=ft.Icons.CHEVRON_RIGHT,
                    tooltip="Next page",
                    disabled=not view.has_next,
                    on_click=lambda e: self.on_next(),
                ),
                ft.IconButton(
                    icon=ft.Icons.LAST_PAGE,
                    tooltip="Last page",
                    disabled=not view.has_next or self.on_last is None,
                    on_click=lambda e: self.on_last(),
                ),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
