from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.orm import selectinload

from storefront.api.routes.product_routes import _product_dict
from storefront.api.utils.params import json_object
from storefront.extensions import db
from storefront.models import INITIAL_ORDER_STATUS, Order, OrderItem

order_bp = Blueprint("order_bp", __name__, url_prefix="/orders")


def _is_int(val) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


def _item_dict(it: OrderItem) -> dict:
    return {
        "id": it.id,
        "order_id": it.order_id,
        "product_id": it.product_id,
        "quantity": it.quantity,
        "price": it.price,
        "product": _product_dict(it.product) if it.product is not None else None,
    }


def _order_dict(o: Order) -> dict:
    return {
        "id": o.id,
        "customer_name": o.customer_name,
        "phone": o.phone,
        "address": o.address,
        "total_price": o.total_price,
        "status": o.status,
        "created_at": o.created_at.isoformat() if o.created_at else None,
        "items": [_item_dict(it) for it in o.items],
    }


def orders_with_items_query():
    """Orders with items and their products loaded, newest first."""
    return Order.query.options(
        selectinload(Order.items).selectinload(OrderItem.product)
    ).order_by(Order.created_at.desc(), Order.id.desc())


def _parse_items(items_in) -> tuple[list[dict] | None, str | None]:
    if not isinstance(items_in, list) or not items_in:
        return None, "Missing order items (items)"

    items = []
    for idx, it in enumerate(items_in):
        if not isinstance(it, dict):
            return None, f"items[{idx}] must be an object"
        product_id = it.get("product_id")
        quantity = it.get("quantity")
        price = it.get("price")
        if not (_is_int(product_id) and _is_int(quantity) and _is_int(price)):
            return None, f"items[{idx}] needs integer product_id, quantity and price"
        if quantity <= 0 or price < 0:
            return None, f"items[{idx}] must have quantity > 0 and price >= 0"
        items.append({"product_id": product_id, "quantity": quantity, "price": price})
    return items, None


def order_total(items: list[dict]) -> int:
    return sum(it["price"] * it["quantity"] for it in items)


@order_bp.post("")
def create_order():
    data = json_object()

    fields = {}
    for key in ("name", "phone", "address"):
        val = data.get(key)
        if not isinstance(val, str) or not val.strip():
            return jsonify({"error": "Missing required fields (name, phone, address)"}), 400
        fields[key] = val.strip()

    items, error = _parse_items(data.get("items"))
    if error:
        return jsonify({"error": error}), 400

    # Prices are taken from the request as-is, not re-read from the catalog.
    order = Order(
        customer_name=fields["name"],
        phone=fields["phone"],
        address=fields["address"],
        total_price=order_total(items),
        status=INITIAL_ORDER_STATUS,
    )
    try:
        db.session.add(order)
        db.session.flush()

        for it in items:
            db.session.add(OrderItem(
                order_id=order.id,
                product_id=it["product_id"],
                quantity=it["quantity"],
                price=it["price"],
            ))

        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("create_order failed")
        return jsonify({"error": "Could not create order"}), 500

    current_app.logger.info(
        "Order #%s created: %d item(s), total=%s", order.id, len(items), order.total_price
    )
    return jsonify({"message": "OK", "order_id": order.id}), 201


@order_bp.get("/history")
def order_history():
    phone = (request.args.get("phone") or "").strip()
    if not phone:
        return jsonify({"error": "Missing 'phone'"}), 400

    orders = orders_with_items_query().filter(Order.phone == phone).all()
    return jsonify({"data": [_order_dict(o) for o in orders]}), 200
