from flask import Blueprint, jsonify

from ..services import auth as auth_service
from ..validation import json_body, require_fields

auth_bp = Blueprint("auth", __name__)


# ----------------------------
# Registrierung
# ----------------------------
@auth_bp.route("/signup", methods=["POST"])
def signup():
    data = json_body()
    require_fields(data, "name", "email", "password")

    user = auth_service.signup(data["name"], data["email"], data["password"], data.get("phone"))
    return jsonify({"message": "Signup successful", "user": user}), 201


# ----------------------------
# Login
# ----------------------------
@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    require_fields(data, "email", "password")

    token = auth_service.login(data["email"], data["password"])
    return jsonify({"message": "Login successful", "token": token})
