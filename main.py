import webview
import sys
import traceback

import app_constants
from edinit.core.API import API
from edinit.startup import run_startup

app_api = None

def start_app(debug=False, show_window=True):
    global app_api

    host, feature_manager = run_startup(app_constants, debug=debug)
    app_api = API(feature_manager, f"{app_constants.APP_NAME} {app_constants.APP_VERSION}")

    if not show_window:
        return host

    webview.create_window(
        f"{app_constants.APP_NAME} {app_constants.APP_VERSION}",
        html=app_api.render_report(),
        js_api=app_api,

        width=app_constants.DEFAULT_WINDOW_DIMENSIONS[0],
        height=app_constants.DEFAULT_WINDOW_DIMENSIONS[1],
        resizable=True,
        fullscreen=False,
        min_size=app_constants.MIN_WINDOW_DIMENSIONS,
        confirm_close=False
    )
    webview.start(debug=debug)
    return host

def handle_exit(code=0):
    if app_api:
        app_api.shutdown()
    sys.exit(code)

def run():
    code = 0
    try:
        start_app(debug="--debug" in sys.argv, show_window="--no-window" not in sys.argv)
    except Exception:
        traceback.print_exc()
        code = 1
    finally:
        handle_exit(code)


if __name__ == '__main__':
    run()
