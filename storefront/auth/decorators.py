# storefront/auth/decorators.py
from functools import wraps

from flask import jsonify, request
from flask_login import current_user, login_required

from storefront.auth.loaders import authenticate
from storefront.extensions import login_manager


def _forbidden():
    return jsonify({"error": "Admin privileges required"}), 403


def admin_required(view):
    """login_required plus an is_admin check; non-admins get 403."""

    @wraps(view)
    @login_required
    def wrapped(*args, **kwargs):
        if not getattr(current_user, "is_admin", False):
            return _forbidden()
        return view(*args, **kwargs)

    return wrapped


def basic_admin_required(view):
    """
    Admin check that ignores the session cookie and only trusts HTTP Basic
    credentials sent with this very request. Used for destructive GET routes,
    which a browser would otherwise replay with the cookie from another site.
    """

    @wraps(view)
    def wrapped(*args, **kwargs):
        auth = request.authorization
        user = None
        if auth is not None and auth.type == "basic":
            user = authenticate(auth.username, auth.password)
        if user is None:
            return login_manager.unauthorized()
        if not user.is_admin:
            return _forbidden()
        return view(*args, **kwargs)

    return wrapped
