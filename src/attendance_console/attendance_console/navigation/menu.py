from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import ValidPage


@dataclass(frozen=True)
class MenuItem:
    title: ValidPage
    url: str
    icon: str


@dataclass(frozen=True)
class MenuSection:
    title_name: str
    show_title: bool
    items: Sequence[MenuItem]


MENU: tuple[MenuSection, ...] = (
    MenuSection(
        title_name="Dashboard",
        show_title=False,
        items=(MenuItem(ValidPage.DASHBOARD, "/", "layout-dashboard"),),
    ),
    MenuSection(
        title_name="Masters",
        show_title=True,
        items=(
            MenuItem(ValidPage.DEPARTMENT, "/department", "hotel"),
            MenuItem(ValidPage.EMPLOYEE, "/employee", "id-card-lanyard"),
        ),
    ),
    MenuSection(
        title_name="Attendance",
        show_title=True,
        items=(
            MenuItem(ValidPage.ATTENDANCE, "/check", "laptop-minimal-check"),
            MenuItem(ValidPage.ATTENDANCE_HISTORY, "/attendance", "list-checks"),
        ),
    ),
)


def find_url_by_title(title: str, menu: Sequence[MenuSection] = MENU) -> str:
    for section in menu:
        for item in section.items:
            if item.title.value == str(getattr(title, "value", title)):
                return item.url
    return "#"
