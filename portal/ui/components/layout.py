"""Page frame: header with the signed-in user and a sidebar of links."""

from collections.abc import Iterator
from contextlib import contextmanager

from nicegui import ui

from portal.core.config import settings
from portal.schemas.account import UserInfo
from portal.ui.auth.context import logout_ui_user
from portal.ui.components.badge import status_badge

# (label, path, material icon)
CUSTOMER_LINKS = [
    ("Dashboard", "/dashboard", "dashboard"),
    ("My instances", "/dashboard/instances", "dns"),
    ("Plans", "/dashboard/plans", "sell"),
    ("Subscription", "/dashboard/subscription", "card_membership"),
    ("Billing", "/dashboard/billing", "receipt_long"),
    ("Profile", "/profile", "person"),
]

ADMIN_LINKS = [
    ("Overview", "/admin/dashboard", "insights"),
    ("Clients", "/admin/clients", "groups"),
    ("Instances", "/admin/instances", "dns"),
    ("Plans", "/admin/plans", "sell"),
    ("Subscriptions", "/admin/subscriptions", "card_membership"),
    ("Payments", "/admin/payments", "payments"),
    ("Profile", "/profile", "person"),
]


def navigation_links(user: UserInfo) -> list[tuple[str, str, str]]:
    return ADMIN_LINKS if user.is_staff else CUSTOMER_LINKS


@contextmanager
def frame(user: UserInfo, title: str) -> Iterator[None]:
    """Wrap page content in the shared header and sidebar."""
    ui.page_title(f"{title} | {settings.PROJECT_NAME}")

    with ui.header().classes("items-center justify-between px-4"):
        with ui.row().classes("items-center gap-2"):
            ui.button(icon="menu", on_click=lambda: drawer.toggle()).props(
                "flat round color=white"
            )
            ui.label(title).classes("text-lg font-medium")
        with ui.row().classes("items-center gap-3"):
            ui.label(user.initial).classes(
                "w-8 h-8 rounded-full bg-white text-primary font-bold "
                "flex items-center justify-center"
            )
            ui.label(user.display_name)
            status_badge("Admin" if user.is_staff else "Client", "neutral")
            ui.button(icon="logout", on_click=logout_ui_user).props(
                "flat round color=white"
            ).tooltip("Log out")

    with ui.left_drawer(value=True).classes("bg-gray-50") as drawer:
        ui.label(settings.PROJECT_NAME).classes("text-xl font-bold mb-4")
        for label, path, icon in navigation_links(user):
            with ui.row().classes("items-center gap-2 py-1"):
                ui.icon(icon).classes("text-gray-500")
                ui.link(label, path).classes("text-gray-800 no-underline")

    with ui.column().classes("w-full max-w-6xl mx-auto p-4 gap-4"):
        yield
