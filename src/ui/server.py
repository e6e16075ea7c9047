from http import HTTPStatus

from flask import Flask, render_template

from core.directory_api import DirectoryFetcher, UpstreamError
from core.site import SiteContext

try:
    from .server_routes_pages import register_routes as register_page_routes
except ImportError:
    from server_routes_pages import register_routes as register_page_routes

EXTENSION_KEY = "squad_page"


def create_app(directory: DirectoryFetcher, context: SiteContext) -> Flask:
    """Build the Flask app around an already loaded :class:`SiteContext`.

    ``directory`` is used for every per-request lookup; ``context.squads`` is
    the snapshot taken at startup and is served unchanged for the lifetime
    of the app.
    """
    app = Flask(__name__, template_folder="templates")
    app.extensions[EXTENSION_KEY] = {"directory": directory, "context": context}

    register_page_routes(app, directory, context)

    @app.errorhandler(UpstreamError)
    def handle_upstream_error(exc: UpstreamError) -> object:
        app.logger.exception("Directory API request failed")
        return (
            render_template("error.html"),
            HTTPStatus.BAD_GATEWAY,
        )

    return app
