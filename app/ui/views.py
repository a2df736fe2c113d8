"""
views.py - UI view builders (login/dashboard)
Single responsibility: build flet Views using provided callbacks/state.
"""

import asyncio

import flet as ft

from app.config import (
    APP_TITLE,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BG,
    COLOR_CARD,
    COLOR_GOLD,
    COLOR_PRIMARY,
    COLOR_ROYAL_BLUE,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    INSTITUTION_NAME,
    LOGIN_TAGLINE,
    SEARCH_DEBOUNCE_SECONDS,
)
from app.domain.filters import STATUS_FILTERS
from app.domain.models import RequestStatus
from app.ui.components.dashboard_header import build_dashboard_header
from app.ui.components.request_card import RequestCard
from app.ui.helpers import filter_color, status_label
from app.ui_state import ReviewViewModel

TAB_ICONS: dict[RequestStatus, str] = {
    RequestStatus.PENDING: ft.Icons.SCHEDULE,
    RequestStatus.APPROVED: ft.Icons.CHECK_CIRCLE_OUTLINE,
    RequestStatus.REJECTED: ft.Icons.CANCEL_OUTLINED,
}


def build_login_view(page: ft.Page, on_login) -> ft.View:
    """on_login(name, faculty_id) is awaited; it returns when the attempt settles."""
    name_field = ft.TextField(
        label="Full Name",
        hint_text="Enter your full name",
        border_radius=BORDER_RADIUS_BTN,
        bgcolor=COLOR_CARD,
    )
    faculty_field = ft.TextField(
        label="Faculty ID",
        hint_text="Enter your faculty id",
        border_radius=BORDER_RADIUS_BTN,
        bgcolor=COLOR_CARD,
    )
    login_button = ft.FilledButton(
        "Login",
        style=ft.ButtonStyle(
            bgcolor=COLOR_GOLD,
            color="black",
            shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
        ),
        height=48,
    )

    busy_row = ft.Row(
        controls=[
            ft.ProgressRing(width=18, height=18, stroke_width=2),
            ft.Text("Logging in...", color=COLOR_TEXT_MUTED),
        ],
        alignment=ft.MainAxisAlignment.CENTER,
        visible=False,
    )

    def set_busy(busy: bool):
        login_button.disabled = busy
        busy_row.visible = busy

    async def on_submit(_e=None):
        if login_button.disabled:
            return
        set_busy(True)
        page.update()
        try:
            await on_login(name_field.value or "", faculty_field.value or "")
        finally:
            set_busy(False)
            page.update()

    login_button.on_click = on_submit
    faculty_field.on_submit = on_submit

    form = ft.Container(
        content=ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.HOW_TO_REG, color=COLOR_GOLD),
                        ft.Text("Teacher Login", size=22, weight=ft.FontWeight.W_600),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                name_field,
                faculty_field,
                login_button,
                busy_row,
            ],
            spacing=18,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
            tight=True,
        ),
        width=420,
        padding=ft.Padding.all(28),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        shadow=ft.BoxShadow(blur_radius=12, color=ft.Colors.BLACK26, offset=ft.Offset(0, 4)),
    )

    return ft.View(
        route="/login",
        bgcolor=COLOR_ROYAL_BLUE,
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[
            ft.Text(INSTITUTION_NAME, size=30, weight=ft.FontWeight.BOLD, color="white"),
            ft.Text(LOGIN_TAGLINE, size=16, color=ft.Colors.WHITE70),
            ft.Container(height=24),
            form,
            ft.Container(height=24),
            ft.Text(APP_TITLE, size=13, color=ft.Colors.WHITE70),
        ],
    )


def _build_empty_state(status: RequestStatus) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(TAB_ICONS[status], size=64, color="#d0d7de"),
                ft.Text(
                    f"No {status.value} Requests",
                    color=COLOR_TEXT_MAIN,
                    size=16,
                    weight=ft.FontWeight.W_500,
                ),
                ft.Text(
                    f"{status_label(status)} requests will appear here.",
                    color=COLOR_TEXT_MUTED,
                ),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=60,
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
    )


def build_dashboard_view(
    page: ft.Page,
    vm: ReviewViewModel,
    on_logout,
    on_approve_request,
    on_photo,
) -> ft.View:
    """Build the review dashboard.

    The request list is re-rendered in place whenever the view model reports
    a change, so the search field keeps focus while results update.
    """
    search_task: asyncio.Task | None = None
    tabs_ref = ft.Ref[ft.Row]()
    filters_ref = ft.Ref[ft.Row]()
    list_column_ref = ft.Ref[ft.Column]()

    def build_card(request) -> RequestCard:
        return RequestCard(
            request,
            is_processing=vm.is_processing(request["id"]),
            on_approve_callback=on_approve_request,
            on_reject_callback=vm.reject,
            on_photo_callback=on_photo,
        )

    def on_tab_click(tab_key: str):
        vm.current_tab = tab_key
        _update_content_inplace()

    def build_tab_btn(status: RequestStatus, count: int):
        selected = vm.current_tab == status.value
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Row(
                [
                    ft.Icon(TAB_ICONS[status], color=color, size=18),
                    ft.Text(
                        f"{status_label(status)} ({count})",
                        color=color,
                        weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
                    ),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
                spacing=8,
            ),
            padding=ft.Padding.symmetric(vertical=12, horizontal=24),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
            ),
            on_click=lambda _: on_tab_click(status.value),
            ink=True,
            expand=True,
            border_radius=ft.border_radius.only(top_left=6, top_right=6),
        )

    def on_filter_click(token: str):
        vm.set_status_filter(token)
        _update_content_inplace()

    def build_filter_btn(token: str):
        selected = vm.status_filter == token
        label = status_label(token)
        if selected:
            return ft.FilledButton(
                label,
                style=ft.ButtonStyle(
                    bgcolor=filter_color(token),
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
                on_click=lambda _: on_filter_click(token),
            )
        return ft.OutlinedButton(
            label,
            style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN)),
            on_click=lambda _: on_filter_click(token),
        )

    def _build_list_controls(partitions) -> list[ft.Control]:
        current = RequestStatus(vm.current_tab)
        items = partitions[current]
        if not items:
            return [_build_empty_state(current)]
        return [build_card(r) for r in items]

    def _update_content_inplace():
        """Update tabs, filter buttons and the list without rebuilding the view."""
        partitions = vm.partition_by_status()
        tabs = tabs_ref.current
        filters = filters_ref.current
        col = list_column_ref.current
        if tabs is None or filters is None or col is None:
            return
        tabs.controls = [build_tab_btn(s, len(partitions[s])) for s in RequestStatus]
        filters.controls = [build_filter_btn(t) for t in STATUS_FILTERS]
        col.controls = _build_list_controls(partitions)
        page.update()

    async def _debounced_search(term_snapshot: str):
        # Debounce to avoid rebuilding the list on every keystroke
        try:
            await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        except asyncio.CancelledError:
            return
        if term_snapshot == vm.search_term:
            _update_content_inplace()

    def on_search(e):
        nonlocal search_task
        vm.set_search_term(e.control.value)
        if search_task and not search_task.done():
            search_task.cancel()

        async def runner(term: str):
            await _debounced_search(term)

        search_task = page.run_task(runner, vm.search_term)

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text="Search by name...",
        value=vm.search_term,
        on_change=on_search,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
    )

    partitions = vm.partition_by_status()

    filters_row = ft.ResponsiveRow(
        controls=[
            ft.Container(content=search_field, col={"xs": 12, "md": 7}),
            ft.Container(
                content=ft.Row(
                    ref=filters_ref,
                    controls=[build_filter_btn(t) for t in STATUS_FILTERS],
                    spacing=8,
                    wrap=True,
                ),
                col={"xs": 12, "md": 5},
            ),
        ],
        spacing=12,
        run_spacing=12,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    tabs = ft.Row(
        ref=tabs_ref,
        controls=[build_tab_btn(s, len(partitions[s])) for s in RequestStatus],
        spacing=0,
    )

    list_content = ft.Column(
        ref=list_column_ref,
        controls=_build_list_controls(partitions),
        scroll=ft.ScrollMode.AUTO,
        expand=True,
        spacing=0,
    )

    vm.on_change = _update_content_inplace

    return ft.View(
        route="/dashboard",
        appbar=build_dashboard_header(
            vm.teacher_display_name, vm.session.initials, on_logout
        ),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[
            filters_row,
            ft.Container(height=16),
            tabs,
            ft.Container(height=16),
            list_content,
        ],
    )
