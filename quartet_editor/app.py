from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from core.catalog.item_catalog import ItemCatalog, load_item_catalog
from core.config import AppConfig
from core.editor.session import EditorSession
from core.errors import EditorError
from core.logging import setup_logging
from core.paths import ensure_runtime_directories
from i18n.i18n import initialize_i18n, tr
from ui.main_window import MainWindow
from ui.widgets.error_dialog import show_editor_error


def _normalize_application_font(app: QApplication) -> None:
    app_font = app.font()
    if app_font.pointSize() > 0:
        return

    pixel_size = app_font.pixelSize()
    if pixel_size > 0:
        screen = app.primaryScreen()
        dpi = screen.logicalDotsPerInch() if screen is not None else 96.0
        point_size = max(1, int(round(pixel_size * 72.0 / dpi)))
    else:
        point_size = 10

    app_font.setPointSize(point_size)
    app.setFont(app_font)


def main() -> int:
    ensure_runtime_directories()

    app = QApplication(sys.argv)
    app.setApplicationName("Quartet Save Editor")
    _normalize_application_font(app)

    config = AppConfig()
    initialize_i18n(config.get_language())

    logger, log_emitter = setup_logging()

    catalog_error: EditorError | None = None
    try:
        catalog = load_item_catalog(logger=logger.getChild("catalog"))
    except EditorError as exc:
        logger.error("%s: %s", exc.title, exc.detail)
        logger.warning(tr("startup.catalog_unavailable"))
        catalog_error = exc
        catalog = ItemCatalog.empty()

    session = EditorSession(catalog=catalog, logger=logger)
    window = MainWindow(config=config, session=session, logger=logger, log_emitter=log_emitter)
    window.show()

    if catalog_error is not None:
        show_editor_error(window, catalog_error)

    logger.info(tr("startup.ready"))
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
