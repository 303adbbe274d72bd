from typing import Callable, Dict, Tuple
import flet as ft

from resultdesk.state.controller import OP_CREATE_RESULT, ResultDeskController
from resultdesk.ui.components import bind_text_field, section_card


def build_results_view(controller: ResultDeskController) -> Tuple[ft.Control, Callable[[], None]]:
    state = controller.state

    student = ft.Dropdown(label="Select student", width=360)
    course = ft.Dropdown(label="Select course", width=360)
    score = ft.TextField(label="Score %", width=110, keyboard_type=ft.KeyboardType.NUMBER, hint_text="0-100")
    semester = ft.TextField(label="Semester", width=110, keyboard_type=ft.KeyboardType.NUMBER)
    year = ft.TextField(label="Year", width=110, keyboard_type=ft.KeyboardType.NUMBER)
    numbers: Dict[str, ft.TextField] = {"score": score, "semester": semester, "year": year}
    bound = {"form": None}

    for field_name, control in numbers.items():
        bind_text_field(control, lambda value, key=field_name: setattr(state.result_form, key, value))

    def on_save(_):
        form = state.result_form
        form.student_id = student.value or ""
        form.course_id = course.value or ""
        for field_name, control in numbers.items():
            setattr(form, field_name, control.value or "")
        controller.create_result()

    save_button = ft.Button("Save Result", on_click=on_save)

    def render() -> None:
        student.options = [ft.dropdown.Option(s.id, s.label) for s in state.students]
        course.options = [ft.dropdown.Option(c.id, c.label) for c in state.courses]

        form = state.result_form
        if bound["form"] is not form:
            student.value = form.student_id or None
            course.value = form.course_id or None
            for field_name, control in numbers.items():
                control.value = getattr(form, field_name)
            bound["form"] = form
        if student.value and student.value not in {s.id for s in state.students}:
            student.value = None
        if course.value and course.value not in {c.id for c in state.courses}:
            course.value = None
        save_button.disabled = controller.tracker.in_flight(OP_CREATE_RESULT)

    render()

    content = ft.ResponsiveRow(
        controls=[
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card(
                    "Add Result",
                    [student, course, ft.Row(controls=[score, semester, year]), save_button],
                ),
            ),
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card(
                    "Tips",
                    [
                        ft.Text(
                            "Results automatically compute grade and grade points based on score.",
                            color=ft.Colors.GREY_700,
                        ),
                        ft.Text(
                            "Use the Grade Sheet tab to view a student's term performance and SGPA.",
                            color=ft.Colors.GREY_700,
                        ),
                    ],
                ),
            ),
        ]
    )
    return content, render
