import pytest

from storefront.models import Order
from tests.conftest import basic_auth

ADMIN_ROUTES = [
    ("get", "/admin/orders"),
    ("put", "/admin/orders/1"),
    ("delete", "/admin/orders/1"),
    ("get", "/force-reset"),
]


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_admin_routes_need_credentials(client, method, path):
    resp = getattr(client, method)(path, json={"status": "shipped"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Authentication required"}
    assert "Basic" in resp.headers.get("WWW-Authenticate", "")


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_wrong_password_is_rejected(client, method, path):
    resp = getattr(client, method)(path, json={"status": "shipped"}, headers=basic_auth("admin", "nope"))
    assert resp.status_code == 401


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_non_admin_is_forbidden(client, method, path):
    resp = getattr(client, method)(path, json={"status": "shipped"}, headers=basic_auth("clerk", "clerk-pass"))
    assert resp.status_code == 403


def test_public_routes_stay_open(client):
    assert client.get("/products").status_code == 200
    assert client.get("/categories").status_code == 200
    assert client.get("/orders/history?phone=1").status_code == 200


def test_session_login_and_logout(client):
    assert client.post("/auth/login", json={"username": "admin", "password": "admin-pass"}).status_code == 200
    assert client.get("/admin/orders").status_code == 200

    assert client.post("/auth/logout").status_code == 200
    assert client.get("/admin/orders").status_code == 401


def test_login_with_bad_credentials(client):
    resp = client.post("/auth/login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401
    assert client.post("/auth/login", json={"username": "admin"}).status_code == 400


def test_force_reset_ignores_session_cookie(app, client, place_order):
    place_order()
    assert client.post("/auth/login", json={"username": "admin", "password": "admin-pass"}).status_code == 200

    resp = client.get(
        "/force-reset",
        headers={"Origin": "https://evil.example", "Sec-Fetch-Site": "cross-site"},
    )
    assert resp.status_code == 401

    # the orders placed before are untouched
    with app.app_context():
        assert Order.query.count() == 1

    # the same session still works for the non-destructive admin routes
    assert client.get("/admin/orders").status_code == 200


def test_force_reset_non_admin_basic_is_forbidden(client):
    assert client.get("/force-reset", headers=basic_auth("clerk", "clerk-pass")).status_code == 403


def test_session_cookie_is_same_site_strict(client):
    resp = client.post("/auth/login", json={"username": "admin", "password": "admin-pass"})
    cookie = resp.headers.get("Set-Cookie", "")
    assert "SameSite=Strict" in cookie
    assert "HttpOnly" in cookie
