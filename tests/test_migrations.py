from flask_migrate import upgrade
from sqlalchemy import inspect

from storefront.app import create_app
from storefront.extensions import db
from storefront.models import Product
from storefront.services.seed import seed_database

HEAD = "4f1c2a7d9b10"
SCHEMA_TABLES = {"categories", "products", "orders", "order_items", "user", "alembic_version"}


def _file_db_config(tmp_path, **extra):
    cfg = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'store.db'}",
        "BCRYPT_LOG_ROUNDS": 4,
        "ADMIN_USERNAME": None,
        "ADMIN_PASSWORD": None,
    }
    cfg.update(extra)
    return cfg


def _version():
    return db.session.execute(db.text("SELECT version_num FROM alembic_version")).scalar_one()


def test_default_startup_then_db_upgrade_on_fresh_database(tmp_path):
    app = create_app(_file_db_config(tmp_path))
    with app.app_context():
        assert SCHEMA_TABLES <= set(inspect(db.engine).get_table_names())
        assert _version() == HEAD

        # what `flask db upgrade` runs after the app has booted
        upgrade()
        assert _version() == HEAD

        seed_database()
        assert Product.query.count() == 3
        db.session.remove()
        db.engine.dispose()


def test_upgrade_builds_schema_without_startup_setup(tmp_path):
    app = create_app(_file_db_config(tmp_path, AUTO_MIGRATE=False, AUTO_CREATE_TABLES=False))
    with app.app_context():
        assert inspect(db.engine).get_table_names() == []

        upgrade()
        assert SCHEMA_TABLES <= set(inspect(db.engine).get_table_names())
        assert _version() == HEAD
        db.session.remove()
        db.engine.dispose()
