"""KPI card."""

from nicegui import ui


def stat_card(label: str, value: object, icon: str, color: str = "primary") -> None:
    with ui.card().classes("grow min-w-40"):
        with ui.row().classes("items-center gap-3"):
            ui.icon(icon, size="md").classes(f"text-{color}")
            with ui.column().classes("gap-0"):
                ui.label(str(value)).classes("text-2xl font-bold")
                ui.label(label).classes("text-gray-500 text-sm")
