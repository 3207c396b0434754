"""Quick deployment form."""

from collections.abc import Awaitable, Callable

from nicegui import ui

from portal.core.config import settings


def deployment_form(on_submit: Callable[[str], Awaitable[bool]]) -> None:
    """Workspace-name input that deploys a new instance.

    ``on_submit`` returns True when the instance was requested; the input is
    then cleared.
    """
    with ui.card().classes("w-full"):
        ui.label("Deploy a new instance").classes("text-lg font-bold")
        with ui.row().classes("w-full items-center gap-2"):
            name_input = ui.input(
                label="Workspace name", placeholder="my-company"
            ).classes("grow")
            ui.label(settings.INSTANCE_DOMAIN_SUFFIX).classes("text-gray-500")
            deploy_button = ui.button("Deploy", icon="rocket_launch")

        async def handle_submit() -> None:
            deploy_button.disable()
            try:
                if await on_submit(name_input.value or ""):
                    name_input.value = ""
            finally:
                deploy_button.enable()

        deploy_button.on_click(handle_submit)
        name_input.on("keydown.enter", handle_submit)
