# storefront/models/user.py
from flask_login import UserMixin

from storefront.extensions import db, bcrypt


class User(db.Model, UserMixin):
    __tablename__ = "user"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)

    # --- Password handling ---------------------------------------------------
    def set_password(self, password: str) -> None:
        self.password_hash = bcrypt.generate_password_hash(password).decode("utf-8")

    def check_password(self, password: str) -> bool:
        if not self.password_hash or not password:
            return False
        try:
            return bcrypt.check_password_hash(self.password_hash, password)
        except ValueError:
            # malformed hash stored in the row
            return False

    def get_id(self):
        return str(self.id)

    def __repr__(self):
        return f"<User {self.username} admin={self.is_admin}>"
