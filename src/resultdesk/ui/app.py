from typing import Callable, Dict, Tuple

import flet as ft

from resultdesk.config.settings import settings
from resultdesk.services.backend_service import BackendService
from resultdesk.state.app_state import (
    TAB_CONNECTIVITY,
    TAB_COURSES,
    TAB_GRADE_SHEET,
    TAB_RESULTS,
    TAB_STUDENTS,
    TABS,
)
from resultdesk.state.controller import ResultDeskController
from resultdesk.ui.components import build_notice, build_tab_bar
from resultdesk.ui.views.connectivity_view import build_connectivity_view
from resultdesk.ui.views.courses_view import build_courses_view
from resultdesk.ui.views.grade_sheet_view import build_grade_sheet_view
from resultdesk.ui.views.results_view import build_results_view
from resultdesk.ui.views.students_view import build_students_view


class ResultDeskApp:
    def __init__(self, page: ft.Page, controller: ResultDeskController) -> None:
        self.page = page
        self.page.title = "Student Result Management"
        self.page.scroll = ft.ScrollMode.AUTO
        self.page.padding = 24
        self.controller = controller

        self.status_area = ft.Container()
        self.tab_area = ft.Container()
        self.body = ft.Container()

        # Views are built once so each tab keeps its inputs while hidden.
        self.views: Dict[str, Tuple[ft.Control, Callable[[], None]]] = {
            TAB_STUDENTS: build_students_view(controller),
            TAB_COURSES: build_courses_view(controller),
            TAB_RESULTS: build_results_view(controller),
            TAB_GRADE_SHEET: build_grade_sheet_view(controller),
            TAB_CONNECTIVITY: build_connectivity_view(controller),
        }

    def run(self) -> None:
        self.controller.subscribe(self.render)
        self.page.add(
            ft.Column(
                spacing=20,
                controls=[
                    ft.Column(
                        spacing=4,
                        controls=[
                            ft.Text("Student Result Management", size=30, weight=ft.FontWeight.BOLD),
                            ft.Text(
                                "Manage students, courses and results, and view grade sheets.",
                                color=ft.Colors.GREY_700,
                            ),
                        ],
                    ),
                    self.status_area,
                    self.tab_area,
                    self.body,
                    ft.Text(f"Backend: {settings.backend_url}", size=12, color=ft.Colors.GREY_600),
                ],
            )
        )
        self.render()
        self.controller.load_initial()

    def render(self) -> None:
        state = self.controller.state

        status = state.status
        self.status_area.content = build_notice(status.kind, status.message) if status.visible else None
        self.status_area.visible = status.visible

        self.tab_area.content = build_tab_bar(TABS, state.active_tab, self.controller.select_tab)

        for _, render_view in self.views.values():
            render_view()
        self.body.content = self.views[state.active_tab][0]

        self.page.update()


def main(page: ft.Page) -> None:
    controller = ResultDeskController(BackendService.from_settings())
    ResultDeskApp(page, controller).run()
