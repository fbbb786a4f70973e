import logging
from typing import Callable, Optional

from flask import Blueprint, jsonify

from ...walker import build_file_tree

log = logging.getLogger(__name__)


def create_tree_blueprint(
    get_repo_dir: Callable[[], Optional[str]], name: str = "api_tree"
) -> Blueprint:
    """Blueprint serving the directory structure of the current repository."""
    bp = Blueprint(name, __name__, url_prefix="/tree")

    @bp.get("")
    def file_tree():
        repo_dir = get_repo_dir()
        if not repo_dir:
            return jsonify({"error": "Repository not loaded"}), 400

        try:
            tree = build_file_tree(repo_dir)
        except Exception as e:
            log.exception(f"File tree failed: repo_dir={repo_dir}")
            return jsonify({"error": str(e)}), 500

        return jsonify(tree.to_dict())

    return bp
