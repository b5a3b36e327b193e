from datetime import datetime, timezone
from decimal import Decimal
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


def money(value):
    if value is None:
        return None
    return float(Decimal(value).quantize(Decimal("0.01")))


# --------------------------------
# User Modell
# --------------------------------
class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(200), nullable=False)
    phone = db.Column(db.String(40))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self):
        # Passwort-Hash wird nie herausgegeben
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email}>"


# --------------------------------
# Produkte
# --------------------------------
class Product(db.Model):
    __tablename__ = "products"
    __table_args__ = (db.CheckConstraint("stock >= 0", name="ck_products_stock"),)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    stock = db.Column(db.Integer, nullable=False, default=0)
    image = db.Column(db.String(500))
    description = db.Column(db.Text)

    def __repr__(self):
        return f"<Product {self.id} {self.name}>"


# --------------------------------
# Warenkorb
# --------------------------------
class CartItem(db.Model):
    __tablename__ = "cart_items"
    __table_args__ = (
        db.UniqueConstraint("user_id", "product_id", "size", name="uq_cart_items_line"),
        db.CheckConstraint("quantity > 0", name="ck_cart_items_quantity"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    size = db.Column(db.String(20), nullable=False, default="")

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "size": self.size,
        }


# --------------------------------
# Adressen
# --------------------------------
class Address(db.Model):
    __tablename__ = "address"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    full_name = db.Column(db.String(200))
    phone = db.Column(db.String(40))
    line1 = db.Column(db.String(200))
    line2 = db.Column(db.String(200))
    city = db.Column(db.String(120))
    state = db.Column(db.String(120))
    pincode = db.Column(db.String(20))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "full_name": self.full_name,
            "phone": self.phone,
            "line1": self.line1,
            "line2": self.line2,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


# --------------------------------
# Bestellungen
# --------------------------------
class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    address_id = db.Column(db.Integer, db.ForeignKey("address.id"))
    total = db.Column(db.Numeric(10, 2), nullable=False)
    payment_method = db.Column(db.String(50))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    items = db.relationship(
        "OrderItem", backref="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )


class OrderItem(db.Model):
    __tablename__ = "order_items"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    size = db.Column(db.String(20), nullable=False, default="")
    # Preis zum Zeitpunkt der Bestellung
    unit_price = db.Column(db.Numeric(10, 2), nullable=False)

    product = db.relationship("Product")
