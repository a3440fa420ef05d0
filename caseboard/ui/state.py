"""
state.py - UI state container
"""
from caseboard.domain.listing import ListViewController
from caseboard.services.list_specs import SCREENS


class AppState:
    def __init__(self):
        self.current_screen: str = SCREENS[0].name
        # one controller per screen, so switching tabs keeps filters and page
        self.controllers: dict[str, ListViewController] = {
            spec.name: ListViewController(spec) for spec in SCREENS
        }
        self.loaded: set[str] = set()
        self.last_error: dict[str, str] = {}

    @property
    def controller(self) -> ListViewController:
        return self.controllers[self.current_screen]
