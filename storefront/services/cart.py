import logging

from sqlalchemy import update

from ..errors import BadRequestError, ConflictError, NotFoundError
from ..models import CartItem, Product, db, money

logger = logging.getLogger(__name__)


# --------------------------------
# Bestand Helper
# --------------------------------
def take_stock(product_id, quantity):
    """Bucht `quantity` vom Bestand ab, aber nur wenn genug da ist.

    Das bedingte UPDATE sperrt die Produktzeile bis zum Ende der
    Transaktion; gleichzeitige Buchungen auf dasselbe Produkt laufen
    dadurch nacheinander. Gibt False zurueck, wenn der Bestand nicht reicht.
    """
    result = db.session.execute(
        update(Product)
        .where(Product.id == product_id, Product.stock >= quantity)
        .values(stock=Product.stock - quantity)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def return_stock(product_id, quantity):
    db.session.execute(
        update(Product)
        .where(Product.id == product_id)
        .values(stock=Product.stock + quantity)
        .execution_options(synchronize_session=False)
    )


# --------------------------------
# Warenkorb laden
# --------------------------------
def list_cart(user_id):
    rows = (
        db.session.query(CartItem, Product)
        .join(Product, CartItem.product_id == Product.id)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id)
        .all()
    )
    return [
        {
            "id": item.id,
            "product_id": product.id,
            "quantity": item.quantity,
            "size": item.size,
            "name": product.name,
            "price": money(product.price),
            "image": product.image,
            "stock": product.stock,
        }
        for item, product in rows
    ]


# --------------------------------
# Artikel hinzufuegen
# --------------------------------
def add_to_cart(user_id, product_id, quantity, size):
    try:
        if not take_stock(product_id, quantity):
            if db.session.get(Product, product_id) is None:
                raise NotFoundError("Product not found")
            raise BadRequestError("Not enough stock available")

        item = CartItem.query.filter_by(user_id=user_id, product_id=product_id, size=size).first()
        if item:
            # Inkrement in der Datenbank, damit kein Update verloren geht
            item.quantity = CartItem.quantity + quantity
        else:
            db.session.add(
                CartItem(user_id=user_id, product_id=product_id, quantity=quantity, size=size)
            )

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Warenkorb: User {user_id} +{quantity} x Produkt {product_id} ({size})")


# --------------------------------
# Artikel aendern
# --------------------------------
def update_cart_item(user_id, item_id, quantity=None, size=None):
    try:
        item = CartItem.query.filter_by(id=item_id, user_id=user_id).first()
        if not item:
            raise NotFoundError("Cart item not found or not owned by user")

        if db.session.get(Product, item.product_id) is None:
            raise NotFoundError("Product not found")

        if quantity is None and size is None:
            raise BadRequestError("No fields to update")

        if quantity is not None and quantity != item.quantity:
            diff = quantity - item.quantity
            if diff > 0:
                if not take_stock(item.product_id, diff):
                    raise BadRequestError("Not enough stock available")
            else:
                return_stock(item.product_id, -diff)
            item.quantity = quantity

        if size is not None and size != item.size:
            clash = CartItem.query.filter(
                CartItem.user_id == user_id,
                CartItem.product_id == item.product_id,
                CartItem.size == size,
                CartItem.id != item.id,
            ).first()
            if clash:
                raise ConflictError("Cart already contains this product in that size")
            item.size = size

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Warenkorb: Position {item_id} von User {user_id} geaendert")
    return item.to_dict()


# --------------------------------
# Artikel entfernen
# --------------------------------
def remove_from_cart(user_id, item_id):
    try:
        item = CartItem.query.filter_by(id=item_id, user_id=user_id).first()
        if not item:
            raise NotFoundError("Item not found")

        product_id, quantity = item.product_id, item.quantity
        db.session.delete(item)
        return_stock(product_id, quantity)

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Warenkorb: Position {item_id} entfernt, {quantity} x Produkt {product_id} zurueckgebucht")
