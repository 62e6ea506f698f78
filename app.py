# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Flask WebUI and JSON API for the portline port visualizer."""

from __future__ import annotations

import logging

from flask import (
    Flask,
    Response,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from config import APP_VERSION, AppSettings, load_settings
from logging_config import setup_logging
from models import PortDataset
from services.auth import CredentialSession, keys_match, require_api_key
from services.collector import SnapshotError, collect_ports, load_snapshot, read_snapshot_file
from services.export import layout_json, layout_result, ports_csv, ports_payload
from services.layout import ORIENTATIONS, build_layout
from services.render_svg import render_layout_svg

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> Flask:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024
    app.config["PORTLINE_SETTINGS"] = settings

    api_key_required = require_api_key(settings.api_key)

    def credentials() -> CredentialSession:
        return CredentialSession(settings.api_key, session)

    def requested_orientation() -> str | None:
        orientation = request.args.get("orientation", settings.default_orientation)
        return orientation if orientation in ORIENTATIONS else None

    def render_view(dataset: PortDataset, orientation: str, source: str) -> str:
        layout = build_layout(dataset, orientation)
        return render_template(
            "index.html",
            layout=layout,
            layout_data=layout_result(layout),
            svg=render_layout_svg(layout),
            orientation=orientation,
            orientations=ORIENTATIONS,
            port_count=len(dataset.items),
            source=source,
            version=APP_VERSION,
        )

    @app.get("/")
    def index() -> str | Response:
        if not credentials().init(request.args.get("apiKey")):
            return render_template("login.html", version=APP_VERSION)
        orientation = requested_orientation()
        if orientation is None:
            flash(f"Unsupported orientation; allowed: {', '.join(ORIENTATIONS)}")
            orientation = settings.default_orientation
        try:
            dataset = read_snapshot_file(settings.snapshot_path)
        except SnapshotError as exc:
            logger.error("snapshot error: %s", exc)
            flash(f"Snapshot error: {exc}")
            dataset = PortDataset()
        return render_view(dataset, orientation, settings.snapshot_path)

    @app.post("/login")
    def login() -> Response:
        entered = request.form.get("api_key", "").strip()
        if not entered:
            flash("Please enter an API key")
        elif not credentials().login(entered):
            logger.info("login rejected")
            flash("Invalid API key")
        return redirect(url_for("index"))

    @app.post("/logout")
    def logout() -> Response:
        credentials().clear()
        return redirect(url_for("index"))

    @app.post("/upload")
    def upload() -> str | Response:
        if not credentials().init():
            return redirect(url_for("index"))
        file = request.files.get("snapshot")
        if not file or not file.filename:
            flash("Please select a container snapshot")
            return redirect(url_for("index"))
        try:
            dataset = collect_ports(load_snapshot(file.read().decode("utf-8")))
        except (SnapshotError, UnicodeDecodeError) as exc:
            flash(f"Snapshot error: {exc}")
            return redirect(url_for("index"))
        orientation = request.form.get("orientation", settings.default_orientation)
        if orientation not in ORIENTATIONS:
            orientation = settings.default_orientation
        return render_view(dataset, orientation, file.filename)

    @app.get("/view.svg")
    def view_svg() -> Response:
        if not credentials().init():
            return Response("Unauthorized", status=401)
        orientation = requested_orientation()
        if orientation is None:
            return Response("Unsupported orientation", status=400)
        try:
            dataset = read_snapshot_file(settings.snapshot_path)
        except SnapshotError as exc:
            return Response(str(exc), status=502)
        return Response(
            render_layout_svg(build_layout(dataset, orientation)), mimetype="image/svg+xml"
        )

    @app.get("/export/ports.csv")
    def export_ports() -> Response:
        if not credentials().init():
            return Response("Unauthorized", status=401)
        try:
            dataset = read_snapshot_file(settings.snapshot_path)
        except SnapshotError as exc:
            return Response(str(exc), status=502)
        return Response(
            ports_csv(dataset, build_layout(dataset)),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=ports.csv"},
        )

    @app.post("/api/validate-key")
    def validate_key() -> Response:
        body = request.get_json(silent=True)
        if not isinstance(body, dict) or not isinstance(body.get("apiKey"), str):
            return Response("Invalid request body", status=400)
        return jsonify({"valid": keys_match(body["apiKey"], settings.api_key)})

    @app.get("/api/ports")
    @api_key_required
    def api_ports() -> Response:
        try:
            dataset = read_snapshot_file(settings.snapshot_path)
        except SnapshotError as exc:
            logger.error("snapshot error: %s", exc)
            return jsonify({"error": "Failed to get port information"}), 502
        return jsonify(ports_payload(dataset))

    @app.get("/api/layout")
    @api_key_required
    def api_layout() -> Response:
        orientation = requested_orientation()
        if orientation is None:
            return jsonify({"error": f"orientation must be one of {list(ORIENTATIONS)}"}), 400
        try:
            dataset = read_snapshot_file(settings.snapshot_path)
        except SnapshotError as exc:
            logger.error("snapshot error: %s", exc)
            return jsonify({"error": "Failed to get port information"}), 502
        return Response(layout_json(build_layout(dataset, orientation)), mimetype="application/json")

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3000, debug=False)
