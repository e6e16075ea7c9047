import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from flask import template_rendered

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.site import SiteContext
from ui.server import create_app

COHORT = "2425"
TRIBE_NAME = "FDND Jaar 1"

SQUADS = [
    {"id": 1, "name": "1G", "cohort": COHORT, "tribe": 3},
    {"id": 2, "name": "1H", "cohort": COHORT, "tribe": 3},
]

PERSONS = [
    {"id": 7, "name": "Ada", "squads": [{"squad_id": {"name": "1G", "cohort": COHORT}}]},
    {"id": 9, "name": "Grace", "squads": [{"squad_id": {"name": "1H", "cohort": COHORT}}]},
]


class StubDirectory:
    """In-memory directory that records every call made to it."""

    def __init__(
        self,
        squads: Optional[List[Dict[str, Any]]] = None,
        persons: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.squads = list(SQUADS if squads is None else squads)
        self.persons = list(PERSONS if persons is None else persons)
        self.calls: List[tuple] = []
        self.error: Optional[Exception] = None

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def fetch_squads(self, cohort, tribe_name):
        self._record("fetch_squads", cohort, tribe_name)
        return list(self.squads)

    def fetch_persons(self, tribe_name, cohort):
        self._record("fetch_persons", tribe_name, cohort)
        return list(self.persons)

    def fetch_person_by_id(self, person_id):
        self._record("fetch_person_by_id", person_id)
        for person in self.persons:
            if str(person["id"]) == str(person_id):
                return person
        return None


@pytest.fixture
def directory():
    return StubDirectory()


@pytest.fixture
def context(directory):
    return SiteContext(cohort=COHORT, tribe_name=TRIBE_NAME, squads=tuple(directory.squads))


@pytest.fixture
def app(directory, context):
    app = create_app(directory, context)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def rendered(app):
    """Collect ``(template_name, context)`` for every template the app renders."""
    records = []

    def _record(sender, template, context, **extra):
        records.append((template.name, context))

    template_rendered.connect(_record, app)
    try:
        yield records
    finally:
        template_rendered.disconnect(_record, app)


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item):
    """Let ``clean_root_logger`` start empty after pytest's log capture handlers are attached."""
    if "clean_root_logger" not in getattr(item, "fixturenames", ()):
        yield
        return
    import logging

    root = logging.getLogger()
    attached = list(root.handlers)
    root.handlers = []
    try:
        yield
    finally:
        root.handlers = attached
