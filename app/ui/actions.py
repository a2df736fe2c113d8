"""
actions.py - UI-side dialogs and notifications
Single responsibility: modal flows around request review.
"""

import flet as ft

from app.config import (
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
    COLOR_GOLD,
    COLOR_ROYAL_BLUE,
    COLOR_TEXT_MAIN,
)

APPROVE_CONFIRM_TEXT = (
    "I hope You have verified with the respective Student "
    "to avoid any Malpractice or Inconvenience."
)


def show_snack(page: ft.Page, title: str, description: str = "", error: bool = False) -> None:
    """Toast-style notification at the bottom of the page."""
    snack = ft.SnackBar(
        content=ft.Column(
            controls=[
                ft.Text(title, weight=ft.FontWeight.BOLD, color="white"),
                *([ft.Text(description, color="white", size=12)] if description else []),
            ],
            spacing=2,
            tight=True,
        ),
        bgcolor=COLOR_DANGER if error else COLOR_TEXT_MAIN,
    )
    page.overlay.append(snack)
    snack.open = True
    page.update()


def show_approve_confirm_dialog(page: ft.Page, request, on_confirm):
    """Ask for confirmation before approving; on_confirm receives the request id."""

    async def on_yes(_e=None):
        dialog.open = False
        page.update()
        await on_confirm(request["id"])

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(
            APPROVE_CONFIRM_TEXT,
            size=16,
            weight=ft.FontWeight.W_600,
            text_align=ft.TextAlign.CENTER,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Yes",
                style=ft.ButtonStyle(bgcolor=COLOR_GOLD, color=COLOR_ROYAL_BLUE),
                on_click=on_yes,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.CENTER,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_photo_dialog(page: ft.Page, request):
    def on_close(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        title=ft.Text(f"{request['name']} - ID Photo", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Image(
                src=request["photo_url"],
                fit=ft.BoxFit.CONTAIN,
                border_radius=BORDER_RADIUS_CARD,
                error_content=ft.Text("Photo unavailable"),
            ),
            width=420,
            alignment=ft.Alignment.CENTER,
        ),
        actions=[ft.TextButton("Close", on_click=on_close)],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
