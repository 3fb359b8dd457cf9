from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import ValidPage
from .menu import MENU, MenuSection, find_url_by_title


@dataclass(frozen=True)
class Crumb:
    label: str
    url: str | None


class NavigationStore:
    """Active-page state shared by the sidebar and the breadcrumb.

    One instance per request, handed to views through ``flask.g``.
    """

    def __init__(self, menu: Sequence[MenuSection] = MENU, initial: ValidPage = ValidPage.DASHBOARD):
        self.menu = menu
        self._page_active = initial

    @property
    def page_active(self) -> ValidPage:
        return self._page_active

    def set_page_active(self, page: ValidPage) -> None:
        if not isinstance(page, ValidPage):
            raise TypeError(f"Unknown page {page!r}")
        self._page_active = page

    def is_active(self, title: ValidPage) -> bool:
        return self._page_active == title

    def breadcrumb(self) -> list[Crumb]:
        return [
            Crumb(self._page_active.value, find_url_by_title(self._page_active.value, self.menu)),
            Crumb("Data List", None),
        ]
