import flet as ft
from app.config import (
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_GOLD,
    COLOR_ROYAL_BLUE,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    BORDER_RADIUS_CARD,
    BORDER_RADIUS_BTN,
)
from app.domain.models import RequestStatus
from app.ui.helpers import detail_rows, initials, status_color, status_label


class RequestCard(ft.Container):
    def __init__(
        self,
        request,
        is_processing: bool,
        on_approve_callback,
        on_reject_callback,
        on_photo_callback,
    ):
        super().__init__()
        self.request = request
        self.is_processing = is_processing
        self.on_approve_callback = on_approve_callback
        self.on_reject_callback = on_reject_callback
        self.on_photo_callback = on_photo_callback

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, "transparent")
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.margin.only(bottom=12)

        self.content = self._build_content()

    def _handle_photo(self, e):
        if self.on_photo_callback:
            self.on_photo_callback(self.request)

    async def _handle_reject(self, e):
        if self.on_reject_callback:
            await self.on_reject_callback(self.request["id"])

    def _handle_approve(self, e):
        if self.on_approve_callback:
            self.on_approve_callback(self.request)

    def _build_avatar(self):
        request = self.request
        return ft.Container(
            content=ft.CircleAvatar(
                content=ft.Text(initials(request["name"]), weight=ft.FontWeight.BOLD),
                foreground_image_src=request["photo_url"] or None,
                bgcolor=COLOR_ROYAL_BLUE,
                color="white",
                radius=32,
            ),
            on_click=self._handle_photo,
            tooltip="View photo",
        )

    def _build_actions(self):
        return ft.Column(
            controls=[
                ft.FilledButton(
                    "Approve",
                    icon=ft.Icons.CHECK,
                    disabled=self.is_processing,
                    style=ft.ButtonStyle(
                        bgcolor=COLOR_GOLD,
                        color=COLOR_ROYAL_BLUE,
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=self._handle_approve,
                ),
                ft.OutlinedButton(
                    "Reject",
                    icon=ft.Icons.CLOSE,
                    disabled=self.is_processing,
                    style=ft.ButtonStyle(
                        color=COLOR_DANGER,
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=self._handle_reject,
                ),
            ],
            spacing=8,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        )

    def _build_content(self):
        request = self.request
        accent_color = status_color(request["status"])

        details = ft.ResponsiveRow(
            controls=[
                ft.Container(
                    content=ft.Text(
                        spans=[
                            ft.TextSpan(f"{label}: ", ft.TextStyle(weight=ft.FontWeight.BOLD)),
                            ft.TextSpan(value),
                        ],
                        size=13,
                        color=COLOR_TEXT_MUTED,
                    ),
                    col={"xs": 12, "sm": 12 if label == "Reason" else 6},
                )
                for label, value in detail_rows(request)
            ],
            spacing=8,
            run_spacing=4,
        )

        return ft.Row(
            controls=[
                self._build_avatar(),
                ft.Column(
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text(
                                    request["name"],
                                    weight=ft.FontWeight.BOLD,
                                    size=16,
                                    color=COLOR_TEXT_MAIN,
                                    max_lines=1,
                                    overflow=ft.TextOverflow.ELLIPSIS,
                                ),
                                ft.Container(
                                    content=ft.Text(
                                        status_label(request["status"]),
                                        size=11,
                                        color="white",
                                        weight=ft.FontWeight.BOLD,
                                    ),
                                    bgcolor=accent_color,
                                    border_radius=12,
                                    padding=ft.Padding.symmetric(horizontal=10, vertical=2),
                                ),
                            ],
                            spacing=8,
                            wrap=True,
                        ),
                        details,
                    ],
                    spacing=6,
                    expand=True,
                ),
                *(
                    [self._build_actions()]
                    if request["status"] == RequestStatus.PENDING
                    else []
                ),
            ],
            spacing=16,
            alignment=ft.MainAxisAlignment.START,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )
