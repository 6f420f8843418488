# storefront/cli.py
import os

import click
from flask import Flask
from sqlalchemy.exc import IntegrityError

from storefront.extensions import db
from storefront.models.user import User


def _find_user(username: str) -> User | None:
    return User.query.filter_by(username=username).first()


def ensure_admin(username: str, password: str, force: bool = False) -> tuple[User, bool]:
    """
    Create the admin account, or with force reset its password and role.
    Returns (user, changed).
    """
    u = _find_user(username)
    if u and not force:
        return u, False

    if not u:
        u = User(username=username)
        db.session.add(u)
    u.is_admin = True
    u.set_password(password)
    try:
        db.session.commit()
    except IntegrityError:
        # another worker inserted the same username first
        db.session.rollback()
        existing = _find_user(username)
        if existing is None:
            raise
        return existing, False
    return u, True


def register_cli(app: Flask) -> None:
    @app.cli.command("create-admin")
    @click.option("--username", default=lambda: os.environ.get("ADMIN_USERNAME", "admin"),
                  show_default=True, help="Admin username")
    @click.option("--password", default=lambda: os.environ.get("ADMIN_PASSWORD"),
                  help="Password (prompted when not given)")
    @click.option("--force", is_flag=True, default=False,
                  help="Reset password and role when the user already exists")
    def create_admin(username: str, password: str | None, force: bool):
        """Create or reset an admin account."""
        if not password:
            password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

        _, changed = ensure_admin(username, password, force=force)
        if not changed:
            click.echo(f"User '{username}' already exists. Use --force to reset the password.")
            return
        click.echo(f"Admin ready: {username}")

    @app.cli.command("reset-db")
    @click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt")
    def reset_db(yes: bool):
        """Drop catalog/order tables and load the demonstration data."""
        from storefront.services.seed import reset_database

        if not yes:
            click.confirm("This deletes every product, category and order. Continue?", abort=True)
        summary = reset_database()
        click.echo(f"Reset done: {summary['categories']} categories, {summary['products']} products")
