from flask import Blueprint, jsonify, request

from storefront.api.utils.params import flag_arg, int_arg
from storefront.models import Product

api_products = Blueprint("api_products", __name__, url_prefix="/products")


def _product_dict(p: Product) -> dict:
    return {
        "id": p.id,
        "category_id": p.category_id,
        "name": p.name,
        "description": p.description or "",
        "price": p.price,
        "image_urls": list(p.image_urls or []),
        "is_recommended": bool(p.is_recommended),
    }


@api_products.get("")
def list_products():
    """
    Catalog listing. All filters are optional and combined with AND:
      - category_id: exact match
      - q: case-insensitive substring of the name
      - recommended=true: recommended products only
    """
    query = Product.query

    category_id = int_arg("category_id")
    if category_id is not None:
        query = query.filter(Product.category_id == category_id)

    q = (request.args.get("q") or "").strip()
    if q:
        query = query.filter(Product.name.ilike(f"%{q}%"))

    if flag_arg("recommended"):
        query = query.filter(Product.is_recommended.is_(True))

    products = query.order_by(Product.id.asc()).all()
    return jsonify({"data": [_product_dict(p) for p in products]}), 200
