from storefront.extensions import db


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    image_url = db.Column(db.String(500), nullable=False, default="")

    # Self-referencing tree; the parent is not enforced with a foreign key.
    parent_id = db.Column(db.Integer, nullable=True, index=True)

    def __repr__(self):
        return f"<Category {self.name}>"
