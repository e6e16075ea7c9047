"""
Data layer for the squad page.

This package contains:
- config: settings read from the environment
- query: Directus filter builders
- directory_api: the HTTP client for the directory API
- site: the startup squad snapshot shared by all requests

The UI layer imports from here; nothing here depends on Flask.
"""

__version__ = "1.0.0"

from .config import Settings, load_settings

from .directory_api import (
    DirectoryClient,
    DirectoryFetcher,
    UpstreamError,
    UpstreamMalformed,
    UpstreamNotFound,
    UpstreamUnavailable,
)

from .site import SiteContext, load_site_context

__all__ = [
    # config
    "Settings",
    "load_settings",

    # directory_api
    "DirectoryClient",
    "DirectoryFetcher",
    "UpstreamError",
    "UpstreamMalformed",
    "UpstreamNotFound",
    "UpstreamUnavailable",

    # site
    "SiteContext",
    "load_site_context",
]
