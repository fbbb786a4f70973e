"""API routes - all prefixed with /api."""

from typing import Callable, Optional

from flask import Blueprint

from . import health
from .functions import create_functions_blueprint
from .tree import create_tree_blueprint


def create_api_blueprint(get_repo_dir: Callable[[], Optional[str]]) -> Blueprint:
    api_bp = Blueprint("api", __name__, url_prefix="/api")
    api_bp.register_blueprint(health.bp)
    api_bp.register_blueprint(create_functions_blueprint(get_repo_dir))
    api_bp.register_blueprint(create_tree_blueprint(get_repo_dir))
    return api_bp


__all__ = ["create_api_blueprint", "create_functions_blueprint", "create_tree_blueprint"]
