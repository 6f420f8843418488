from storefront.extensions import db


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    # 0 when uncategorised; not enforced as a foreign key
    category_id = db.Column(db.Integer, nullable=False, default=0, index=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    # smallest currency unit
    price = db.Column(db.Integer, nullable=False, default=0)
    image_urls = db.Column(db.JSON, nullable=False, default=list)
    is_recommended = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Product {self.name}>"
