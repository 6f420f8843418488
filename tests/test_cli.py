from storefront.models import Product, User


def test_create_admin(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["create-admin", "--username", "boss", "--password", "s3cret"])
    assert result.exit_code == 0
    assert "Admin ready: boss" in result.output

    with app.app_context():
        user = User.query.filter_by(username="boss").one()
        assert user.is_admin
        assert user.check_password("s3cret")


def test_create_admin_existing_needs_force(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["create-admin", "--username", "admin", "--password", "other"])
    assert "already exists" in result.output
    with app.app_context():
        assert User.query.filter_by(username="admin").one().check_password("admin-pass")

    runner.invoke(args=["create-admin", "--username", "admin", "--password", "other", "--force"])
    with app.app_context():
        assert User.query.filter_by(username="admin").one().check_password("other")


def test_promote_with_force(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["create-admin", "--username", "clerk", "--password", "x", "--force"])
    with app.app_context():
        assert User.query.filter_by(username="clerk").one().is_admin


def test_reset_db_command(app):
    result = app.test_cli_runner().invoke(args=["reset-db", "--yes"])
    assert result.exit_code == 0
    assert "5 categories, 3 products" in result.output
    with app.app_context():
        assert Product.query.count() == 3


def test_reset_db_aborts_without_confirmation(app):
    result = app.test_cli_runner().invoke(args=["reset-db"], input="n\n")
    assert result.exit_code != 0
    with app.app_context():
        assert Product.query.count() == 0


def test_ensure_admin_when_another_worker_won(app, monkeypatch):
    from storefront import cli

    real_find = cli._find_user
    calls = []

    def lookup_misses_first(username):
        # first lookup runs before the other worker's insert is visible
        calls.append(username)
        return None if len(calls) == 1 else real_find(username)

    monkeypatch.setattr(cli, "_find_user", lookup_misses_first)
    with app.app_context():
        user, changed = cli.ensure_admin("admin", "other-pass")
        assert changed is False
        assert user.username == "admin"
        assert user.check_password("admin-pass")
        assert User.query.filter_by(username="admin").count() == 1
