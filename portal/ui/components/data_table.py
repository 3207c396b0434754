"""Generic data table with custom cell renderers."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from nicegui import ui


@dataclass(frozen=True)
class Column[T]:
    """A table column.

    Attributes:
        label: Header text
        render: Draws the cell content for a row inside the current container
        align: Tailwind text alignment of the cell
    """

    label: str
    render: Callable[[T], object]
    align: str = "left"


def text_column[T](label: str, value: Callable[[T], object]) -> Column[T]:
    """Column showing ``value(row)`` as plain text."""
    return Column(label, lambda row: ui.label(str(value(row))))


def data_table[T](
    columns: Sequence[Column[T]],
    rows: Sequence[T],
    empty_message: str = "No data",
) -> None:
    """Render rows as an HTML table, or a placeholder when there are none."""
    if not rows:
        ui.label(empty_message).classes("w-full text-center text-gray-500 py-8")
        return

    with ui.element("table").classes("w-full text-sm"):
        with ui.element("thead"), ui.element("tr").classes("border-b"):
            for column in columns:
                with ui.element("th").classes(
                    f"text-{column.align} p-2 text-gray-500 uppercase text-xs"
                ):
                    ui.label(column.label)
        with ui.element("tbody"):
            for row in rows:
                with ui.element("tr").classes("border-b hover:bg-gray-50"):
                    for column in columns:
                        with ui.element("td").classes(f"text-{column.align} p-2"):
                            column.render(row)
