## routes.py
from __future__ import annotations

from pathlib import Path

from flask import Blueprint, abort, current_app, request, send_file

from janatonese_web.repositories.output_repository import INDEX_FILENAME, OutputRepository, find_file_under

# Every method gets the SPA entry point; only GET/HEAD may hit real files.
CATCH_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
RETRY_AFTER_SECONDS = 5


def _strip_mount(path: str, mount: str) -> str | None:
    """Returns the part of `path` below the mount, or None when outside it."""
    prefix = mount.strip("/") + "/"
    if prefix == "/" or not path.startswith(prefix):
        return None
    return path[len(prefix):]


def create_blueprint(output_repo: OutputRepository, orchestrator, *, frontend_root: Path,
                     project_mount: str = "/janatonese", wait_for_ready: bool = False) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.before_request
    def gate_until_ready():
        if wait_for_ready and not orchestrator.is_ready:
            return (
                "Front-end is still being prepared. Try again shortly.",
                503,
                {"Retry-After": str(RETRY_AFTER_SECONDS)},
            )
        return None

    def _resolve_static(path: str) -> Path | None:
        # Same order as the mounts: build output first, then the project mount.
        found = output_repo.find_static_file(path)
        if found:
            return found
        below_mount = _strip_mount(path, project_mount)
        if below_mount:
            return find_file_under(frontend_root, below_mount)
        return None

    @bp.route("/", defaults={"path": ""}, methods=CATCH_ALL_METHODS)
    @bp.route("/<path:path>", methods=CATCH_ALL_METHODS)
    def serve(path: str):
        if request.method in ("GET", "HEAD"):
            found = _resolve_static(path)
            if found:
                return send_file(found)

        if not output_repo.has_index():
            current_app.logger.warning("No %s in %s yet; cannot serve /%s", INDEX_FILENAME, output_repo.output_dir, path)
            abort(404)
        return send_file(output_repo.index_path, mimetype="text/html")

    return bp
