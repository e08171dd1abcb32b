# edgeblog/routes/auth.py
from flask import Blueprint, jsonify, request

from edgeblog.services import accounts

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True) or {}
    user = accounts.register(data.get("name"), data.get("email"), data.get("password"))
    return jsonify({"message": "User registered successfully!", "user": user.to_dict()}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}
    token, user = accounts.login(data.get("email"), data.get("password"))
    return jsonify({"message": "Login successful!", "token": token, "user": user.to_dict()}), 200
