import logging
import uuid
from pathlib import Path
from typing import Callable, Optional

from flask import Flask, g, jsonify, request

from ..config import Config
from ..scan import scan_as_dicts
from .routes import create_api_blueprint

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


def _configured_repo_dir() -> Optional[str]:
    return Config.REPO_DIR


def create_app(get_repo_dir: Optional[Callable[[], Optional[str]]] = None):
    """Create the API app.

    Args:
        get_repo_dir: Returns the repository to index, or None when nothing
            is loaded. Defaults to CODE_EXPLORER_REPO_DIR.
    """
    app = Flask(__name__)

    @app.before_request
    def set_request_context():
        g.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

    @app.after_request
    def add_request_id_header(response):
        response.headers["X-Request-ID"] = g.get("request_id", "")
        return response

    # Blueprints
    app.register_blueprint(create_api_blueprint(get_repo_dir or _configured_repo_dir))

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "not found"}), 404
        return "Not Found", 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if request.path.startswith("/api/"):
            return jsonify({"error": "method not allowed"}), 405
        return "Method Not Allowed", 405

    @app.errorhandler(500)
    def internal_error(e):
        log.exception("Internal server error")
        if request.path.startswith("/api/"):
            return jsonify({"error": "internal server error"}), 500
        return "Internal Server Error", 500

    return app


def create_dev_app(root: str | Path):
    """App for interactive use against a single directory.

    The index is computed once at startup and served at /api/data. The
    regular /api/* routes stay live against the same directory.
    """
    root = str(Path(root).resolve())
    data = scan_as_dicts(root)
    log.info(f"Indexed {len(data)} functions under {root}")

    app = create_app(lambda: root)

    @app.get("/api/data")
    def snapshot():
        return jsonify(data)

    return app


__all__ = ["create_app", "create_dev_app"]
