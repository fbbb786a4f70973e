from flask import Blueprint, jsonify

bp = Blueprint("api_health", __name__, url_prefix="/health")


@bp.get("")
def health():
    return jsonify({"status": "ok"})
