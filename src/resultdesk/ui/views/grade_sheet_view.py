from typing import Callable, Tuple
import flet as ft

from resultdesk.state.controller import ResultDeskController
from resultdesk.state.status import StatusKind
from resultdesk.ui.components import bind_text_field, build_notice, build_table, section_card


def build_grade_sheet_view(controller: ResultDeskController) -> Tuple[ft.Control, Callable[[], None]]:
    state = controller.state

    student = ft.Dropdown(label="Select student", width=320)
    semester = ft.TextField(
        label="Semester (optional)",
        width=180,
        keyboard_type=ft.KeyboardType.NUMBER,
        value=state.grade_query.semester,
    )
    year = ft.TextField(
        label="Year (optional)",
        width=180,
        keyboard_type=ft.KeyboardType.NUMBER,
        value=state.grade_query.year,
    )
    sheet_area = ft.Column(spacing=12)

    bind_text_field(semester, lambda value: setattr(state.grade_query, "semester", value))
    bind_text_field(year, lambda value: setattr(state.grade_query, "year", value))

    def on_fetch(_):
        state.grade_query.semester = semester.value or ""
        state.grade_query.year = year.value or ""
        controller.select_student(student.value)
        controller.fetch_grade_sheet()

    def render() -> None:
        student.options = [ft.dropdown.Option(s.id, s.label) for s in state.students]
        if student.value and student.value not in {s.id for s in state.students}:
            student.value = None

        sheet = state.grade_sheet
        sheet_area.controls.clear()
        if sheet is None:
            return
        sheet_area.controls.append(build_notice(StatusKind.SUCCESS, f"SGPA: {sheet.sgpa_label}"))
        sheet_area.controls.append(
            build_table(
                ["Course", "Score", "Grade", "Grade Point", "Semester", "Year"],
                [(r.course_id, r.score, r.grade, r.grade_point, r.semester, r.year) for r in sheet.results],
                "No results found",
            )
        )

    render()

    content = section_card(
        "View Grade Sheet",
        [
            ft.Row(
                wrap=True,
                controls=[student, semester, year, ft.Button("Fetch", on_click=on_fetch)],
            ),
            sheet_area,
        ],
    )
    return content, render
