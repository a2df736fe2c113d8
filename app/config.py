"""
config.py - 接続先・アプリ定数
ID Card Review v1.0
"""

import os

# ---------------------------------------------------------------------------
# 接続先（環境変数で上書き可）
# ---------------------------------------------------------------------------

_DEV_API_URL = "http://localhost:5000"
_PROD_API_URL = "https://faculty-backend-1zre.onrender.com"


def get_api_url() -> str:
    """
    API のベース URL を返す。
    - IDCARD_API_URL が設定されていればそれを使う
    - IDCARD_ENV=development ならローカルサーバー
    - それ以外は本番サーバー
    """
    explicit = os.environ.get("IDCARD_API_URL")
    if explicit:
        return explicit.rstrip("/")
    if os.environ.get("IDCARD_ENV") == "development":
        return _DEV_API_URL
    return _PROD_API_URL


API_URL = get_api_url()
HTTP_TIMEOUT_SECONDS = float(os.environ.get("IDCARD_HTTP_TIMEOUT", "15"))

# エンドポイント
PENDING_PATH = "/api/pending"
APPROVED_HISTORY_PATH = "/api/acchistoryids"
REJECTED_HISTORY_PATH = "/api/rejhistoryids"
STATUS_PATH_TEMPLATE = "/api/requests/{request_id}/status"
CHECK_FACULTY_PATH_TEMPLATE = "/api/check-faculty/{faculty_id}"

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Digital ID Card Request Management System"
APP_VERSION = "0.1.0"
INSTITUTION_NAME = "Sona College of Technology"
LOGIN_TAGLINE = "Teachers don’t just teach , they shape the future."
SEARCH_DEBOUNCE_SECONDS = 0.3
LOGOUT_DELAY_SECONDS = 1.2

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_PENDING = "#CA8A04"  # 黄
COLOR_APPROVED = "#16A34A"  # 緑
COLOR_REJECTED = "#DC2626"  # 赤
COLOR_ROYAL_BLUE = "#1E3A8A"
COLOR_GOLD = "#FACC15"
COLOR_BG = "#EEF2FF"  # 薄い藍色（背景）
COLOR_CARD = "#FFFFFF"  # カード背景
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#1D4ED8"  # プライマリ（青）
COLOR_DANGER = "#CF222E"  # 危険色（赤）

# AppBar
COLOR_APPBAR_BG = COLOR_ROYAL_BLUE
COLOR_APPBAR_FG = "#FFFFFF"

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
