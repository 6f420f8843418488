# storefront/auth/__init__.py
from .decorators import admin_required, basic_admin_required
from .login_routes import auth_bp

__all__ = ["admin_required", "basic_admin_required", "auth_bp"]
