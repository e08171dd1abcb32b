# edgeblog/routes/admin_routes.py
from flask import Blueprint, jsonify

from edgeblog.auth.decorators import token_required
from edgeblog.services import stats

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/admin-dashboard", methods=["GET"])
@token_required
def admin_dashboard():
    return jsonify(stats.dashboard()), 200


@admin_bp.route("/metrics", methods=["GET"])
def admin_metrics():
    return jsonify(stats.metrics()), 200
