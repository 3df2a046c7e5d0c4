"""
config.py - パス解決・アプリ定数
Tasker v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# パス解決（exe 化対応）
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Return the directory that holds the app's data file.
    - TASKER_DATA_DIR set: that directory
    - frozen exe        : directory of the executable
    - script            : project root
    """
    data_dir = os.environ.get("TASKER_DATA_DIR")
    if data_dir:
        return data_dir
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in tasker/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()
DB_PATH = os.path.join(BASE_PATH, "tasks.db")

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Tasks"

# "desktop" | "web"
APP_VIEW = os.environ.get("TASKER_VIEW", "desktop").lower()
LOG_LEVEL = os.environ.get("TASKER_LOG_LEVEL", "INFO").upper()

# Persisted keys
STORAGE_KEY = "tasks"
FILTER_STORAGE_KEY = "tasks_filter"

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_DONE = "#8250df"  # 紫
COLOR_BG = "#F0F2F5"  # 背景
COLOR_CARD = "#FFFFFF"  # 行の背景
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#0969DA"  # プライマリ（青）
COLOR_DANGER = "#CF222E"  # 危険色（赤）

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
CONTENT_WIDTH = 640
