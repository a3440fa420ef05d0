import flet as ft
from caseboard.config import (
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    BORDER_RADIUS_CARD,
)
from caseboard.ui.helpers import describe_record, status_color, status_label


class RecordCard(ft.Container):
    def __init__(self, record, on_click_callback=None):
        super().__init__()
        self.record = record
        self.summary = describe_record(record)
        self.on_click_callback = on_click_callback

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, "transparent")
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.on_click = self._handle_click
        self.ink = True
        self.margin = ft.margin.only(bottom=12)

        self.content = self._build_content()

    def _handle_click(self, e):
        if self.on_click_callback:
            self.on_click_callback(self.record)

    def _build_content(self):
        summary = self.summary
        accent_color = status_color(summary.status)

        body = [
            ft.Text(
                summary.title,
                weight=ft.FontWeight.BOLD,
                size=16,
                color=COLOR_TEXT_MAIN,
                max_lines=1,
                overflow=ft.TextOverflow.ELLIPSIS,
            ),
            ft.Row(
                controls=[
                    ft.Text(m, size=12, color=COLOR_TEXT_MUTED) for m in summary.meta
                ],
                spacing=12,
                wrap=True,
            ),
        ]
        if summary.badges:
            body.append(
                ft.Row(
                    controls=[
                        ft.Container(
                            content=ft.Text(
                                status_label(badge),
                                size=11,
                                color=COLOR_PRIMARY,
                                weight=ft.FontWeight.W_500,
                            ),
                            bgcolor="#E6F2FF",
                            padding=ft.Padding.symmetric(horizontal=8, vertical=2),
                            border_radius=10,
                        )
                        for badge in summary.badges
                    ],
                    spacing=4,
                    run_spacing=4,
                    wrap=True,
                )
            )
        if summary.progress is not None:
            body.append(
                ft.Row(
                    controls=[
                        ft.ProgressBar(
                            value=max(0, min(summary.progress, 100)) / 100,
                            color=accent_color,
                            bgcolor="#EAEEF2",
                            expand=True,
                        ),
                        ft.Text(f"{summary.progress}%", size=12, color=COLOR_TEXT_MUTED),
                    ],
                    spacing=8,
                )
            )

        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.CIRCLE, size=14, color=accent_color),
                ft.Column(controls=body, spacing=4, expand=True),
                ft.Container(
                    content=ft.Text(
                        status_label(summary.status),
                        size=11,
                        color="white",
                        weight=ft.FontWeight.BOLD,
                    ),
                    bgcolor=accent_color,
                    border_radius=12,
                    padding=ft.Padding.symmetric(horizontal=10, vertical=2),
                ),
            ],
            spacing=16,
            alignment=ft.MainAxisAlignment.START,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )
