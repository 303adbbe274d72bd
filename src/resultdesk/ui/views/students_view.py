from typing import Callable, Dict, Tuple
import flet as ft

from resultdesk.state.controller import OP_CREATE_STUDENT, ResultDeskController
from resultdesk.ui.components import bind_text_field, build_table, section_card


def build_students_view(controller: ResultDeskController) -> Tuple[ft.Control, Callable[[], None]]:
    state = controller.state

    name = ft.TextField(label="Full name", width=360)
    email = ft.TextField(label="Email", width=360, keyboard_type=ft.KeyboardType.EMAIL)
    roll_number = ft.TextField(label="Roll number", width=360)
    department = ft.TextField(label="Department", width=360)
    semester = ft.TextField(label="Semester", width=170, keyboard_type=ft.KeyboardType.NUMBER, hint_text="1-12")
    year = ft.TextField(label="Year", width=170, keyboard_type=ft.KeyboardType.NUMBER, hint_text="2000-2100")
    fields: Dict[str, ft.TextField] = {
        "name": name,
        "email": email,
        "roll_number": roll_number,
        "department": department,
        "semester": semester,
        "year": year,
    }

    search = ft.TextField(label="Search name, roll, email", expand=True, value=state.student_search)
    table_area = ft.Column()
    bound = {"form": None}

    for field_name, control in fields.items():
        bind_text_field(control, lambda value, key=field_name: setattr(state.student_form, key, value))
    bind_text_field(search, controller.set_student_search)

    def on_save(_):
        form = state.student_form
        for field_name, control in fields.items():
            setattr(form, field_name, control.value or "")
        controller.create_student()

    def on_search(_):
        controller.refresh_students(search.value or "")

    save_button = ft.Button("Save Student", on_click=on_save)
    search.on_submit = on_search

    def render() -> None:
        form = state.student_form
        if bound["form"] is not form:
            for field_name, control in fields.items():
                control.value = getattr(form, field_name)
            bound["form"] = form
        save_button.disabled = controller.tracker.in_flight(OP_CREATE_STUDENT)
        table_area.controls = [
            build_table(
                ["Name", "Roll", "Dept", "Sem", "Year"],
                [(s.name, s.roll_number, s.department, s.semester, s.year) for s in state.students],
                "No students found",
            )
        ]

    render()

    content = ft.ResponsiveRow(
        controls=[
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card(
                    "Add Student",
                    [name, email, roll_number, department, ft.Row(controls=[semester, year]), save_button],
                ),
            ),
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card(
                    "Students List",
                    [
                        ft.Row(controls=[search, ft.OutlinedButton("Search", on_click=on_search)]),
                        table_area,
                    ],
                ),
            ),
        ]
    )
    return content, render
