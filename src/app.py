"""WSGI entry point.

Exposes a fully built Flask application as ``app`` so that commands such as
``flask --app app run`` or ``gunicorn app:app`` work from ``src/``. Importing
this module takes the squad snapshot, so the directory API must be reachable.
"""

from server import build_app, configure_logging

configure_logging()
app = build_app()


if __name__ == "__main__":  # pragma: no cover - convenience entrypoint
    from core.config import load_settings

    settings = load_settings()
    app.run(host=settings.host, port=settings.port, debug=False)
