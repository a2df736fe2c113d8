import flet as ft
from app.config import (
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    COLOR_GOLD,
    COLOR_ROYAL_BLUE,
    INSTITUTION_NAME,
    SHADOW_ELEVATION,
)


def build_dashboard_header(display_name: str, user_initials: str, on_logout) -> ft.AppBar:
    return ft.AppBar(
        leading=ft.Container(
            content=ft.CircleAvatar(
                content=ft.Text("ID", weight=ft.FontWeight.BOLD, color=COLOR_ROYAL_BLUE),
                bgcolor=COLOR_GOLD,
                radius=18,
            ),
            padding=ft.Padding.only(left=16),
        ),
        title=ft.Text(
            INSTITUTION_NAME,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        automatically_imply_leading=False,
        actions=[
            ft.Row(
                controls=[
                    ft.CircleAvatar(
                        content=ft.Text(user_initials, size=12, color=COLOR_ROYAL_BLUE),
                        bgcolor=COLOR_GOLD,
                        radius=16,
                    ),
                    ft.Text(
                        f"Welcome, {display_name}",
                        color=COLOR_APPBAR_FG,
                        weight=ft.FontWeight.W_500,
                    ),
                    ft.OutlinedButton(
                        "Logout",
                        icon=ft.Icons.LOGOUT,
                        style=ft.ButtonStyle(color=COLOR_APPBAR_FG),
                        on_click=lambda e: on_logout(),
                    ),
                ],
                spacing=12,
            ),
            ft.Container(width=16),
        ],
    )
