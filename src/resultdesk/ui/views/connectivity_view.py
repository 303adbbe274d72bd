from typing import Callable, Tuple
import flet as ft

from resultdesk.config.settings import settings
from resultdesk.state.controller import ResultDeskController
from resultdesk.ui.components import section_card


def build_connectivity_view(controller: ResultDeskController) -> Tuple[ft.Control, Callable[[], None]]:
    content = section_card(
        "Connectivity Test",
        [
            ft.Text("Use the separate connectivity tester page.", color=ft.Colors.GREY_700),
            ft.Row(
                controls=[
                    ft.Button("Open Test Page", url=settings.connectivity_test_url),
                    ft.OutlinedButton("Check Backend", on_click=lambda _: controller.check_connectivity()),
                ]
            ),
        ],
    )
    return content, lambda: None
