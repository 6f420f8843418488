import base64

import pytest

from storefront.app import create_app
from storefront.extensions import db
from storefront.models import User
from storefront.services.seed import seed_database

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "AUTO_MIGRATE": False,
    "AUTO_CREATE_TABLES": True,
    "SECRET_KEY": "test-secret",
    "BCRYPT_LOG_ROUNDS": 4,
    "ADMIN_USERNAME": None,
    "ADMIN_PASSWORD": None,
}


def basic_auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def app():
    app = create_app(dict(TEST_CONFIG))
    with app.app_context():
        admin = User(username=ADMIN_USERNAME, is_admin=True)
        admin.set_password(ADMIN_PASSWORD)
        clerk = User(username="clerk", is_admin=False)
        clerk.set_password("clerk-pass")
        db.session.add_all([admin, clerk])
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return basic_auth(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def seeded(app):
    with app.app_context():
        seed_database()
    return app


@pytest.fixture
def place_order(client):
    def _place(phone="+70000000000", items=None, name="Ivan", address="Lenina 1"):
        if items is None:
            items = [{"product_id": 1, "quantity": 2, "price": 100}]
        resp = client.post(
            "/orders",
            json={"name": name, "phone": phone, "address": address, "items": items},
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["order_id"]

    return _place
