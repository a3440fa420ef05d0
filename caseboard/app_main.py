"""
app_main.py - Caseboard main application
"""

import logging

import flet as ft

from caseboard.api.connection import ApiSession
from caseboard.config import APP_TITLE, APP_VERSION, COLOR_BG, COLOR_DANGER, COLOR_PRIMARY
from caseboard.domain.results import Err
from caseboard.services import filter_service, record_service
from caseboard.ui import views
from caseboard.ui.state import AppState

logger = logging.getLogger(__name__)


def main(page: ft.Page, session: ApiSession | None = None):
    page.title = f"{APP_TITLE} {APP_VERSION}"
    page.window.maximized = True
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(
        color_scheme_seed=COLOR_PRIMARY,
        font_family="Roboto",
    )

    owns_session = session is None
    session = session or ApiSession.from_config()
    state = AppState()

    def show_snack(message: str, error: bool = False, retry=None):
        snack = ft.SnackBar(
            ft.Text(message),
            bgcolor=COLOR_DANGER if error else None,
            action="Retry" if retry else None,
            on_action=(lambda e: retry()) if retry else None,
        )
        page.overlay.append(snack)
        snack.open = True
        page.update()

    def load_screen(name: str) -> None:
        result = record_service.load(session, name)
        if isinstance(result, Err):
            state.last_error[name] = str(result)
            # keep whatever was shown before the failed refresh
            state.controllers[name].set_records(record_service.cached(name))
            show_snack(f"Could not load {name.replace('_', ' ')}: {result}", error=True, retry=reload_current)
            return
        state.last_error.pop(name, None)
        state.loaded.add(name)
        state.controllers[name].set_records(result.data)

    def reload_current():
        load_screen(state.current_screen)
        refresh_list()

    def select_screen(name: str):
        state.current_screen = name
        if name not in state.loaded:
            load_screen(name)
        refresh_list()

    def save_preset():
        controller = state.controller
        filter_service.save_preset(
            state.current_screen, controller.filter_state, controller.sort_state
        )
        show_snack("Filter saved")

    def load_preset():
        preset = filter_service.load_preset(state.current_screen)
        if preset is None:
            show_snack("No saved filter for this list")
            return
        state.controller.restore(preset.filter_state, preset.sort_state)
        refresh_list()

    def clear_filters():
        state.controller.reset()
        refresh_list()

    def refresh_list():
        try:
            page.views.clear()
            page.views.append(
                views.build_list_view(
                    page=page,
                    state=state,
                    on_select_screen=select_screen,
                    on_refresh=reload_current,
                    on_rebuild=refresh_list,
                    on_save_preset=save_preset,
                    on_load_preset=load_preset,
                    on_clear_filter=clear_filters,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_list")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Something went wrong"),
                    content=ft.Text(f"Details: {exc}"),
                    open=True,
                )
            )
            page.update()

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh_list()

    def on_close(_e):
        if owns_session:
            session.close()

    page.on_route_change = route_change
    page.on_close = on_close

    select_screen(state.current_screen)


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
