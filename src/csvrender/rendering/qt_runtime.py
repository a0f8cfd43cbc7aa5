"""Qt application bootstrap for headless rendering."""

from __future__ import annotations

import logging
import os

from PyQt6.QtGui import QGuiApplication

logger = logging.getLogger(__name__)

# Fonts and painters need a QGuiApplication; keep a reference so it is not collected.
_APP = None

# 72 dpi: one typographic point equals one device pixel.
DOTS_PER_METER_72DPI = round(72 / 0.0254)


def ensure_qt_app() -> QGuiApplication:
    """Return the running Qt application, creating an offscreen one if needed.

    Must be called from the main thread before any rendering starts.
    """
    global _APP

    app = QGuiApplication.instance()
    if app is not None:
        return app

    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    _APP = QGuiApplication([])
    logger.debug(f"Created QGuiApplication on platform {QGuiApplication.platformName()}")
    return _APP
