import logging
from typing import Callable, Optional

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from ...scan import scan
from ..schemas import FunctionQuery

log = logging.getLogger(__name__)


def create_functions_blueprint(
    get_repo_dir: Callable[[], Optional[str]], name: str = "api_functions"
) -> Blueprint:
    """Blueprint serving the function index of the current repository.

    Args:
        get_repo_dir: Returns the repository root, or None when no
            repository is loaded. Owned by the caller and never modified.
        name: Blueprint name, must be unique within an app
    """
    bp = Blueprint(name, __name__, url_prefix="/functions")

    @bp.get("")
    def list_functions():
        repo_dir = get_repo_dir()
        if not repo_dir:
            return jsonify({"error": "Repository not loaded"}), 400

        try:
            query = FunctionQuery.model_validate(request.args.to_dict())
        except ValidationError as e:
            return jsonify(
                {"error": "validation failed", "details": e.errors(include_context=False)}
            ), 400

        try:
            records = scan(repo_dir, tag=query.tag)
        except Exception as e:
            log.exception(f"Function scan failed: repo_dir={repo_dir}")
            return jsonify({"error": str(e)}), 500

        return jsonify([record.to_dict() for record in records])

    return bp
