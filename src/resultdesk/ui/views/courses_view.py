from typing import Callable, Dict, Tuple
import flet as ft

from resultdesk.state.controller import OP_CREATE_COURSE, ResultDeskController
from resultdesk.ui.components import bind_text_field, build_table, section_card


def build_courses_view(controller: ResultDeskController) -> Tuple[ft.Control, Callable[[], None]]:
    state = controller.state

    code = ft.TextField(label="Course code", width=360)
    title = ft.TextField(label="Title", width=360)
    credits = ft.TextField(label="Credits", width=170, keyboard_type=ft.KeyboardType.NUMBER, hint_text="Steps of 0.5")
    fields: Dict[str, ft.TextField] = {"code": code, "title": title, "credits": credits}
    table_area = ft.Column()
    bound = {"form": None}

    for field_name, control in fields.items():
        bind_text_field(control, lambda value, key=field_name: setattr(state.course_form, key, value))

    def on_save(_):
        form = state.course_form
        for field_name, control in fields.items():
            setattr(form, field_name, control.value or "")
        controller.create_course()

    save_button = ft.Button("Save Course", on_click=on_save)

    def render() -> None:
        form = state.course_form
        if bound["form"] is not form:
            for field_name, control in fields.items():
                control.value = getattr(form, field_name)
            bound["form"] = form
        save_button.disabled = controller.tracker.in_flight(OP_CREATE_COURSE)
        table_area.controls = [
            build_table(
                ["Code", "Title", "Credits"],
                [(c.code, c.title, c.credits) for c in state.courses],
                "No courses found",
            )
        ]

    render()

    content = ft.ResponsiveRow(
        controls=[
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card("Add Course", [code, title, credits, save_button]),
            ),
            ft.Container(
                col={"sm": 12, "md": 6},
                content=section_card("Courses List", [table_area]),
            ),
        ]
    )
    return content, render
