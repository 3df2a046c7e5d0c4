import logging
import sys

from tasker.config import APP_VIEW, LOG_LEVEL

# ロギング設定
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if __name__ == "__main__":
    import flet as ft
    from tasker.app_main import main

    view = ft.AppView.WEB_BROWSER if APP_VIEW == "web" else ft.AppView.FLET_APP

    try:
        ft.run(main, view=view)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)
