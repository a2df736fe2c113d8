"""
app_main.py - ID Card Review メインアプリケーション
ID Card Review v1.0
"""

import asyncio
import logging

import flet as ft

from app.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY, LOGOUT_DELAY_SECONDS
from app.errors import LoginError
from app.remote.connection import get_client
from app.services import auth_service
from app.services.request_store import RequestStore
from app.session import SessionContext
from app.ui import actions, views
from app.ui_state import ReviewViewModel

logger = logging.getLogger(__name__)

LOGIN_ERROR_TITLES = {
    "invalid_id": "Invalid Faculty ID",
}


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.window.maximized = True
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    client = get_client()
    session = SessionContext()
    current_vm: ReviewViewModel | None = None

    def notify(title: str, description: str):
        actions.show_snack(page, title, description)

    def show_error_dialog(title: str, exc: Exception):
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text(title),
                content=ft.Text(f"Details: {exc}"),
                open=True,
            )
        )
        page.update()

    # ------------------------------------------------------------------
    # ログイン
    # ------------------------------------------------------------------

    async def handle_login(name: str, faculty_id: str):
        try:
            await auth_service.login(client, session, name, faculty_id)
        except LoginError as exc:
            actions.show_snack(
                page,
                LOGIN_ERROR_TITLES.get(exc.reason, "Error"),
                str(exc),
                error=True,
            )
            return
        notify("Login Successful", f"Welcome, {session.teacher_name}!")
        show_dashboard()

    def show_login():
        page.views.clear()
        page.views.append(views.build_login_view(page, handle_login))
        page.update()

    # ------------------------------------------------------------------
    # ダッシュボード
    # ------------------------------------------------------------------

    async def handle_logout():
        nonlocal current_vm
        if current_vm is not None:
            current_vm.on_change = None
            current_vm = None
        auth_service.logout(session)
        notify("Logged Out", "You have been successfully logged out.")
        await asyncio.sleep(LOGOUT_DELAY_SECONDS)
        show_login()

    def show_dashboard():
        nonlocal current_vm
        if not session.is_active:
            show_login()
            return

        store = RequestStore(client)
        vm = ReviewViewModel(store, session, notify=notify)
        current_vm = vm
        try:
            page.views.clear()
            page.views.append(
                views.build_dashboard_view(
                    page=page,
                    vm=vm,
                    on_logout=lambda: page.run_task(handle_logout),
                    on_approve_request=lambda request: actions.show_approve_confirm_dialog(
                        page, request, vm.approve
                    ),
                    on_photo=lambda request: actions.show_photo_dialog(page, request),
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in show_dashboard")
            show_error_dialog("Something went wrong", exc)
            return
        # 1 マウントにつき 1 回だけ読み込む
        page.run_task(vm.refresh)

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/dashboard":
            show_dashboard()
        else:
            show_login()

    page.on_route_change = route_change

    async def on_window_event(e: ft.WindowEvent):
        if e.type == ft.WindowEventType.CLOSE:
            try:
                await client.aclose()
            except Exception:
                logger.warning("Failed to close HTTP client", exc_info=True)
            page.window.prevent_close = False
            await page.window.close()

    page.window.prevent_close = True
    page.window.on_event = on_window_event

    show_login()


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
