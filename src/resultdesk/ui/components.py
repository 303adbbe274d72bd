from typing import Callable, Iterable, List, Optional, Sequence

import flet as ft

from resultdesk.state.status import StatusKind

# kind -> (background, text)
NOTICE_COLORS = {
    StatusKind.INFO: (ft.Colors.BLUE_50, ft.Colors.BLUE_700),
    StatusKind.SUCCESS: (ft.Colors.GREEN_50, ft.Colors.GREEN_700),
    StatusKind.ERROR: (ft.Colors.RED_50, ft.Colors.RED_700),
    StatusKind.WARNING: (ft.Colors.AMBER_50, ft.Colors.AMBER_900),
}


def build_notice(kind: StatusKind, message: str) -> ft.Container:
    background, foreground = NOTICE_COLORS.get(kind, NOTICE_COLORS[StatusKind.INFO])
    return ft.Container(
        padding=12,
        border_radius=6,
        bgcolor=background,
        content=ft.Text(message, size=14, color=foreground),
    )


def build_tab_bar(tabs: Sequence[str], active: str, on_change: Callable[[str], None]) -> ft.Row:
    buttons: List[ft.Control] = []
    for tab in tabs:
        def handler(_, name=tab):
            on_change(name)

        if tab == active:
            buttons.append(ft.FilledButton(tab, on_click=handler))
        else:
            buttons.append(ft.OutlinedButton(tab, on_click=handler))
    return ft.Row(controls=buttons, wrap=True, spacing=8)


def section_card(title: str, controls: Iterable[ft.Control], footer: Optional[ft.Control] = None) -> ft.Card:
    body: List[ft.Control] = [ft.Text(title, size=20, weight=ft.FontWeight.BOLD), *controls]
    if footer is not None:
        body.append(footer)
    return ft.Card(
        content=ft.Container(
            padding=20,
            content=ft.Column(controls=body, spacing=12),
        )
    )


def build_table(headers: Sequence[str], rows: Iterable[Sequence[object]], empty_text: str) -> ft.Column:
    data_rows = [
        ft.DataRow(cells=[ft.DataCell(ft.Text("" if value is None else str(value))) for value in row])
        for row in rows
    ]
    controls: List[ft.Control] = [
        ft.DataTable(
            columns=[ft.DataColumn(ft.Text(header, weight=ft.FontWeight.BOLD)) for header in headers],
            rows=data_rows,
        )
    ]
    if not data_rows:
        controls.append(ft.Text(empty_text, color=ft.Colors.GREY_600))
    return ft.Column(controls=controls, scroll=ft.ScrollMode.AUTO)


def bind_text_field(field: ft.TextField, on_value: Callable[[str], None]) -> None:
    def handler(e):
        on_value(e.control.value or "")

    field.on_change = handler
