# app.py
# Flask REST API for the schedule creator: schedule generation, course autocomplete and the static frontend.

import time
from typing import Any, Optional

from flask import Flask, current_app, g, jsonify, request, send_from_directory

from auto_completer import AutoCompleter
from config import Settings, get_settings
from course_catalog import CourseCatalog
from logging_config import get_logger, setup_logging
from models import ScheduleSelectOptions
from schedule_creator import ScheduleCreator, unresolvable_pairs

log = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, catalog: Optional[CourseCatalog] = None) -> Flask:
    # Builds the app around a catalog that is fully loaded before the first request.
    settings = settings or get_settings()
    setup_logging(json_output=settings.log_json, log_level=settings.log_level)
    if catalog is None:
        catalog = CourseCatalog.from_file(settings.courses_file)

    app = Flask(__name__, static_folder="static")
    app.config["SETTINGS"] = settings
    app.extensions["schedule_creator"] = ScheduleCreator(catalog)
    app.extensions["auto_completer"] = AutoCompleter(catalog.valid_courses())

    app.before_request(_start_timer)
    app.after_request(_finish_request)
    app.register_error_handler(404, _not_found)

    app.add_url_rule("/api/schedules", view_func=api_schedules, methods=["GET"])
    app.add_url_rule("/api/autocomplete", view_func=api_autocomplete, methods=["GET"])
    app.add_url_rule("/", view_func=root, methods=["GET"])
    return app


def api_schedules():
    # GET /api/schedules?courses=CPSC 121,MATH 100&term=1&lectures_only=false
    raw = request.args.get("courses", "")
    courses = [c.strip() for c in raw.split(",") if c.strip()]
    if not courses:
        return respond_error(400, "courses must be a non-empty comma-separated list")

    options = ScheduleSelectOptions(
        term=request.args.get("term") or current_app.config["SETTINGS"].default_term,
        select_labs_and_tutorials=request.args.get("lectures_only") == "false",
    )
    creator: ScheduleCreator = current_app.extensions["schedule_creator"]
    schedules = creator.create(courses, options)
    if schedules:
        return respond_ok([s.to_dict() for s in schedules])

    # Nothing fits: report which pairs of courses can never be taken together.
    return respond_ok([], unresolvablePairs=unresolvable_pairs(creator, courses, options))


def api_autocomplete():
    # GET /api/autocomplete?text=cps
    text = request.args.get("text")
    if text is None:
        return respond_error(400, "text is required")
    completer: AutoCompleter = current_app.extensions["auto_completer"]
    return respond_ok(completer.courses_with_prefix(text))


def root():
    # Serves the main index.html, the entry point for the SPA.
    return send_from_directory(current_app.static_folder, "index.html")


def respond_ok(body: Any, **extra: Any):
    return jsonify({"OK": True, "status": 200, "body": body, **extra}), 200


def respond_error(status: int, message: str):
    return jsonify({"OK": False, "status": status, "body": {"error": message}}), status


def _not_found(_error):
    return respond_error(404, f"no route for {request.path}")


def _start_timer():
    g.request_started = time.perf_counter()


def _finish_request(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET"
    started = g.get("request_started")
    log.info(
        "request_completed",
        method=request.method,
        path=request.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2) if started else None,
    )
    return response


if __name__ == "__main__":
    # Load course data into memory and start the development server.
    settings = get_settings()
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.debug)
