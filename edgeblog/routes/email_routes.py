# edgeblog/routes/email_routes.py
from flask import Blueprint, jsonify, request

from edgeblog.services import notifications

email_bp = Blueprint("email", __name__)


@email_bp.route("/subscribe", methods=["POST"])
def subscribe():
    data = request.get_json(silent=True) or {}
    notifications.send_subscription(data.get("email"), name=data.get("name"), message=data.get("message"))
    return jsonify({"message": "Message sent successfully!"}), 200


@email_bp.route("/contact", methods=["POST"])
def contact():
    data = request.get_json(silent=True) or {}
    notifications.send_contact_message(
        data.get("name"),
        data.get("email"),
        data.get("message"),
        subject=data.get("subject"),
    )
    return jsonify({"message": "Message sent successfully!"}), 200
