# storefront/auth/login_routes.py
from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, login_user, logout_user

from storefront.auth.loaders import authenticate

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.post("/login")
def login():
    """Open a session for an admin; the session cookie then replaces Basic auth."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    username = str(data.get("username") or "").strip()
    password = str(data.get("password") or "")
    if not username or not password:
        return jsonify({"error": "Missing 'username' or 'password'"}), 400

    user = authenticate(username, password)
    if user is None:
        current_app.logger.info("[LOGIN] rejected username=%r", username)
        return jsonify({"error": "Invalid credentials"}), 401

    login_user(user)
    current_app.logger.info("[LOGIN] uid=%s", user.id)
    return jsonify({"message": "Logged in"}), 200


@auth_bp.post("/logout")
@login_required
def logout():
    logout_user()
    return jsonify({"message": "Logged out"}), 200
