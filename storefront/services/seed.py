# storefront/services/seed.py
"""
Destructive reset of the catalog and order tables plus the fixed
demonstration data set.

Admin users live in a separate table and survive a reset.
"""
from __future__ import annotations

from flask import current_app

from storefront.extensions import db
from storefront.models import CATALOG_MODELS, Category, Product

# (name, parent name)
SEED_CATEGORIES: list[tuple[str, str | None]] = [
    ("Инструменты", None),
    ("Стройматериалы", None),
    ("Электроинструмент", "Инструменты"),
    ("Ручной инструмент", "Инструменты"),
    ("Сухие смеси", "Стройматериалы"),
]

SEED_PRODUCTS: list[dict] = [
    {
        "category": "Электроинструмент",
        "name": "Дрель Makita",
        "description": "Мощная ударная дрель (для теста)",
        "price": 45000,
        "is_recommended": True,
        "image_urls": [
            "https://cdn.vseinstrumenti.ru/images/goods/instrument/dreli-shurupoverty/826998/1200x800/53248856.jpg",
            "https://cdn.vseinstrumenti.ru/images/goods/instrument/dreli-shurupoverty/826998/1200x800/60451475.jpg",
        ],
    },
    {
        "category": "Ручной инструмент",
        "name": "Набор отверток",
        "description": "Профессиональный набор, 8 штук.",
        "price": 12000,
        "is_recommended": True,
        "image_urls": [
            "https://cdn.vseinstrumenti.ru/images/goods/ruchnoy-instrument/otvertki/842358/1200x800/52675276.jpg",
        ],
    },
    {
        "category": "Сухие смеси",
        "name": "Цемент М500",
        "description": "Мешок 50кг.",
        "price": 6500,
        "is_recommended": True,
        "image_urls": ["https://st35.stpulscen.ru/images/product/282/684/669_big.jpg"],
    },
]


def _catalog_tables():
    return [model.__table__ for model in CATALOG_MODELS]


def recreate_tables() -> None:
    """Drop and create the four catalog/order tables (children dropped first)."""
    # release the session's connection before DDL runs on the engine
    db.session.commit()
    db.session.close()

    tables = _catalog_tables()
    db.metadata.drop_all(bind=db.engine, tables=tables)
    db.metadata.create_all(bind=db.engine, tables=list(reversed(tables)))


def seed_database() -> dict:
    """Insert the demonstration categories and products. Returns row counts."""
    log = current_app.logger
    log.info("Seeding demonstration catalog...")

    by_name: dict[str, Category] = {}
    for name, parent_name in SEED_CATEGORIES:
        parent = by_name.get(parent_name) if parent_name else None
        c = Category(name=name, image_url="", parent_id=parent.id if parent else None)
        db.session.add(c)
        # parent ids are needed by the next rows
        db.session.flush()
        by_name[name] = c

    for row in SEED_PRODUCTS:
        db.session.add(Product(
            category_id=by_name[row["category"]].id,
            name=row["name"],
            description=row["description"],
            price=row["price"],
            is_recommended=row["is_recommended"],
            image_urls=list(row["image_urls"]),
        ))

    db.session.commit()
    summary = {"categories": len(SEED_CATEGORIES), "products": len(SEED_PRODUCTS)}
    log.info("Seed done: %s", summary)
    return summary


def reset_database() -> dict:
    """Wipe products, categories, orders and order items, then reseed."""
    current_app.logger.warning("Full data reset requested: dropping catalog and order tables")
    try:
        recreate_tables()
        return seed_database()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("reset_database failed")
        raise
