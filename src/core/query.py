from __future__ import annotations

import json
from typing import Any, Dict, List

PERSON_FIELDS = "*,squads.squad_id.name,squads.squad_id.cohort"
PERSON_SORT = "name"


def and_(*clauses: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    return {"_and": list(clauses)}


def squad_filter(cohort: str, tribe_name: str) -> Dict[str, Any]:
    """Squads of one cohort that belong to the named tribe."""
    return and_(
        {"cohort": cohort},
        {"tribe": {"name": tribe_name}},
    )


def person_filter(tribe_name: str, cohort: str) -> Dict[str, Any]:
    """Persons with at least one squad in the named tribe and cohort."""
    return and_(
        {"squads": {"squad_id": {"tribe": {"name": tribe_name}}}},
        {"squads": {"squad_id": {"cohort": cohort}}},
    )


def encode_filter(filter_obj: Dict[str, Any]) -> str:
    return json.dumps(filter_obj, separators=(",", ":"), ensure_ascii=False)
