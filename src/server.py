import logging
import sys
from pathlib import Path
from typing import Optional

from flask import Flask

sys.path.insert(0, str(Path(__file__).parent))

from core.config import Settings, load_settings
from core.directory_api import DirectoryClient, DirectoryFetcher
from core.site import load_site_context
from ui.server import create_app

logger = logging.getLogger("squad_page")


def configure_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(level)


def build_app(
    settings: Optional[Settings] = None,
    directory: Optional[DirectoryFetcher] = None,
) -> Flask:
    """Load settings, take the squad snapshot and return the Flask app."""
    settings = settings or load_settings()
    if directory is None:
        directory = DirectoryClient(settings.api_url, timeout=settings.request_timeout)
    context = load_site_context(directory, settings.cohort, settings.tribe_name)
    return create_app(directory, context)


def main() -> None:
    configure_logging()
    settings = load_settings()
    app = build_app(settings)
    logger.info("App is live at http://localhost:%s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
