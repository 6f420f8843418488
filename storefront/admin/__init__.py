from flask import Blueprint

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")
# /force-reset lives at the root, outside the /admin prefix
reset_bp = Blueprint("reset", __name__)

from . import order_routes  # noqa: E402,F401
from . import reset_routes  # noqa: E402,F401
