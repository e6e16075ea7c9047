from http import HTTPStatus

from flask import redirect, render_template

from core.directory_api import DirectoryFetcher
from core.site import SiteContext


def register_routes(app, directory: DirectoryFetcher, context: SiteContext):
    @app.get("/")
    def index() -> object:
        persons = directory.fetch_persons(context.tribe_name, context.cohort)
        return render_template("index.html", persons=persons, squads=list(context.squads))

    @app.post("/")
    def submit_index() -> object:
        # Nothing is stored; the form only round-trips back to the listing.
        return redirect("/", code=HTTPStatus.SEE_OTHER)

    @app.get("/student/<string:person_id>")
    def student_detail(person_id: str) -> object:
        person = directory.fetch_person_by_id(person_id)
        return render_template("student.html", person=person, squads=list(context.squads))
