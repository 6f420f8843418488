from flask import Blueprint, jsonify

from storefront.api.utils.params import int_arg
from storefront.models import Category

api_categories = Blueprint("api_categories", __name__, url_prefix="/categories")


def _cat_to_dict(c: Category) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "image_url": c.image_url or "",
        "parent_id": c.parent_id,
    }


@api_categories.get("")
def list_categories():
    # without parent_id only the root level is returned
    parent_id = int_arg("parent_id")
    q = Category.query
    if parent_id is not None:
        q = q.filter(Category.parent_id == parent_id)
    else:
        q = q.filter(Category.parent_id.is_(None))
    items = q.order_by(Category.id.asc()).all()
    return jsonify({"data": [_cat_to_dict(c) for c in items]}), 200
