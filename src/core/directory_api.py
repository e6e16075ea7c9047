"""
Client for the FDND Directus "WHOIS" API.

Only three read operations are needed by the site:
- fetch_squads: squads of one cohort inside one tribe
- fetch_persons: persons in those squads, sorted by name
- fetch_person_by_id: a single person record

Each call issues exactly one GET request. Nothing is retried or cached here;
the startup squad snapshot lives in ``core.site``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol
from urllib.parse import quote

import requests

from .query import PERSON_FIELDS, PERSON_SORT, encode_filter, person_filter, squad_filter

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class UpstreamError(Exception):
    """Base class for failures talking to the directory API."""


class UpstreamUnavailable(UpstreamError):
    """Transport failure or an unexpected HTTP status."""


class UpstreamMalformed(UpstreamError):
    """The response body is not JSON or lacks a usable ``data`` member."""


class UpstreamNotFound(UpstreamError):
    """The requested item does not exist upstream."""


class DirectoryFetcher(Protocol):
    def fetch_squads(self, cohort: str, tribe_name: str) -> List[Record]: ...

    def fetch_persons(self, tribe_name: str, cohort: str) -> List[Record]: ...

    def fetch_person_by_id(self, person_id: str) -> Optional[Record]: ...


# Directus answers 403 for ids that do not exist under the public role.
NOT_FOUND_STATUSES = frozenset({403, 404})


class DirectoryClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "DirectoryClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get_data(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        *,
        not_found_ok: bool = False,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamUnavailable(f"Request to {url} failed: {exc}") from exc

        if not_found_ok and response.status_code in NOT_FOUND_STATUSES:
            raise UpstreamNotFound(f"{url} answered {response.status_code}.")
        if response.status_code >= 400:
            raise UpstreamUnavailable(f"{url} answered {response.status_code}.")

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamMalformed(f"{url} did not return JSON.") from exc
        if not isinstance(body, dict) or "data" not in body:
            raise UpstreamMalformed(f"{url} returned a body without 'data'.")
        return body["data"]

    def _get_list(self, path: str, params: Dict[str, str]) -> List[Record]:
        data = self._get_data(path, params)
        if not isinstance(data, list):
            raise UpstreamMalformed(f"Expected a list from {path}, got {type(data).__name__}.")
        return data

    def fetch_squads(self, cohort: str, tribe_name: str) -> List[Record]:
        return self._get_list(
            "items/squad",
            {"filter": encode_filter(squad_filter(cohort, tribe_name))},
        )

    def fetch_persons(self, tribe_name: str, cohort: str) -> List[Record]:
        return self._get_list(
            "items/person",
            {
                "sort": PERSON_SORT,
                "fields": PERSON_FIELDS,
                "filter": encode_filter(person_filter(tribe_name, cohort)),
            },
        )

    def fetch_person_by_id(self, person_id: str) -> Optional[Record]:
        """Return the person record, or ``None`` when upstream has no match."""
        path = f"items/person/{quote(str(person_id), safe='')}"
        try:
            data = self._get_data(path, not_found_ok=True)
        except UpstreamNotFound:
            logger.info("Person %s not found upstream", person_id)
            return None

        if isinstance(data, list):
            data = data[0] if data else None
        if data is None:
            return None
        if not isinstance(data, dict):
            raise UpstreamMalformed(f"Expected an object from {path}, got {type(data).__name__}.")
        return data
