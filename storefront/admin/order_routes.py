from flask import current_app, jsonify

from storefront.api.routes.order_routes import _order_dict, orders_with_items_query
from storefront.api.utils.params import json_object
from storefront.auth import admin_required
from storefront.extensions import db
from storefront.models import ORDER_STATUSES, Order, OrderItem
from . import admin_bp


def _get_order_or_404(order_id: int):
    order = db.session.get(Order, order_id)
    if order is None:
        return None, (jsonify({"error": "Order not found"}), 404)
    return order, None


@admin_bp.get("/orders")
@admin_required
def list_orders():
    orders = orders_with_items_query().all()
    return jsonify({"data": [_order_dict(o) for o in orders]}), 200


@admin_bp.put("/orders/<int:order_id>")
@admin_required
def update_order_status(order_id: int):
    data = json_object()
    status = data.get("status")
    if not isinstance(status, str) or not status.strip():
        return jsonify({"error": "Missing 'status'"}), 400
    status = status.strip()
    if status not in ORDER_STATUSES:
        return jsonify({
            "error": f"Invalid status '{status}'",
            "allowed": list(ORDER_STATUSES),
        }), 400

    order, err = _get_order_or_404(order_id)
    if err:
        return err

    old_status = order.status
    order.status = status
    db.session.commit()
    current_app.logger.info("Order #%s status %s -> %s", order_id, old_status, status)
    return jsonify({"message": "Updated"}), 200


@admin_bp.delete("/orders/<int:order_id>")
@admin_required
def delete_order(order_id: int):
    order, err = _get_order_or_404(order_id)
    if err:
        return err

    # items first, then the order row, in one transaction
    removed = OrderItem.query.filter_by(order_id=order_id).delete(synchronize_session=False)
    db.session.delete(order)
    db.session.commit()
    current_app.logger.info("Order #%s deleted with %d item(s)", order_id, removed)
    return jsonify({"message": "Deleted"}), 200
