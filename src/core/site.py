from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from .directory_api import DirectoryFetcher, Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteContext:
    """Values shared by every request, built once before the app serves."""

    cohort: str
    tribe_name: str
    squads: Tuple[Record, ...] = field(default_factory=tuple)


def load_site_context(directory: DirectoryFetcher, cohort: str, tribe_name: str) -> SiteContext:
    # The squad list is never refreshed after this call.
    squads = directory.fetch_squads(cohort, tribe_name)
    logger.info("Loaded %d squads for %s (cohort %s)", len(squads), tribe_name, cohort)
    return SiteContext(cohort=cohort, tribe_name=tribe_name, squads=tuple(squads))
