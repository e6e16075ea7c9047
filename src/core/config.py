"""Runtime settings read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_API_URL = "https://fdnd.directus.app"
DEFAULT_COHORT = "2425"
DEFAULT_TRIBE_NAME = "FDND Jaar 1"


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    api_url: str = DEFAULT_API_URL
    cohort: str = DEFAULT_COHORT
    tribe_name: str = DEFAULT_TRIBE_NAME
    request_timeout: Optional[float] = None


def _parse_port(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}.") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}.")
    return port


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"DIRECTORY_API_TIMEOUT must be a number, got {raw!r}.") from None
    if timeout <= 0:
        raise ValueError("DIRECTORY_API_TIMEOUT must be positive.")
    return timeout


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``).

    A ``.env`` file in the working directory is loaded first when reading
    the real process environment; variables already set take precedence.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        port=_parse_port(environ.get("PORT")),
        host=environ.get("HOST") or DEFAULT_HOST,
        api_url=(environ.get("DIRECTORY_API_URL") or DEFAULT_API_URL).rstrip("/"),
        cohort=environ.get("COHORT") or DEFAULT_COHORT,
        tribe_name=environ.get("TRIBE_NAME") or DEFAULT_TRIBE_NAME,
        request_timeout=_parse_timeout(environ.get("DIRECTORY_API_TIMEOUT")),
    )
