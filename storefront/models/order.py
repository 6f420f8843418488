# storefront/models/order.py
from datetime import datetime, timezone
from storefront.extensions import db

INITIAL_ORDER_STATUS = "new"
ORDER_STATUSES = (INITIAL_ORDER_STATUS, "processing", "shipped", "delivered", "canceled")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)

    # customer
    customer_name = db.Column(db.String(150), nullable=False)
    phone = db.Column(db.String(50), nullable=False, index=True)
    address = db.Column(db.Text, nullable=False)

    total_price = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(32), nullable=False, default=INITIAL_ORDER_STATUS)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    items = db.relationship(
        "OrderItem",
        back_populates="order",
        lazy=True,
        order_by="OrderItem.id",
    )

    def __repr__(self):
        return f"<Order #{self.id} – {self.customer_name} – {self.status}>"
