# storefront/auth/loaders.py
"""
Flask-Login hooks for the admin API.

Admin clients either log in once (session cookie) or send HTTP Basic
credentials with every request; both resolve to a ``User`` row.
"""
from flask import jsonify, request

from storefront.extensions import db, login_manager
from storefront.models.user import User


def authenticate(username: str | None, password: str | None) -> User | None:
    """Return the user matching the credentials, or None."""
    username = (username or "").strip()
    if not username or not password:
        return None
    user = User.query.filter_by(username=username).first()
    if user and user.check_password(password):
        return user
    return None


@login_manager.user_loader
def load_user(user_id):
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None


@login_manager.request_loader
def load_user_from_request(req):
    auth = req.authorization
    if auth is None or auth.type != "basic":
        return None
    return authenticate(auth.username, auth.password)


@login_manager.unauthorized_handler
def unauthorized():
    resp = jsonify({"error": "Authentication required"})
    resp.status_code = 401
    if not request.authorization:
        resp.headers["WWW-Authenticate"] = 'Basic realm="storefront-admin"'
    return resp
