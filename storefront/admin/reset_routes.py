from flask import jsonify

from storefront.auth import basic_admin_required
from storefront.services.seed import reset_database
from . import reset_bp


@reset_bp.get("/force-reset")
@basic_admin_required
def force_reset():
    """Drop every catalog/order table and load the demonstration data again."""
    summary = reset_database()
    return jsonify({"message": "Database reset and reseeded", "seeded": summary}), 200
