# storefront/models/__init__.py
from .user import User
from .category import Category
from .product import Product
from .order import Order, ORDER_STATUSES, INITIAL_ORDER_STATUS
from .order_item import OrderItem

# Tables wiped and recreated by the data reset; admin users are left alone.
CATALOG_MODELS = (OrderItem, Order, Product, Category)

__all__ = [
    "User",
    "Category",
    "Product",
    "Order",
    "OrderItem",
    "ORDER_STATUSES",
    "INITIAL_ORDER_STATUS",
    "CATALOG_MODELS",
]
