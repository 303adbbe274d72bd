import logging
import sys

import flet as ft

from resultdesk.config.settings import settings
from resultdesk.ui.app import main

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def run() -> None:
    configure_logging()
    logger.info("Starting ResultDesk against %s", settings.backend_url)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
