import logging
from collections import Counter
from decimal import Decimal

from ..errors import BadRequestError, NotFoundError
from ..models import Address, CartItem, Order, OrderItem, Product, db
from .cart import take_stock

logger = logging.getLogger(__name__)


def checkout(user_id, address_id, payment_method):
    """Legt aus dem Warenkorb eine Bestellung an.

    Alles laeuft in einer Transaktion: Warenkorb lesen, Bestand pruefen,
    Bestellung und Positionen anlegen, Bestand abbuchen, Warenkorb leeren.
    Bei jedem Fehler wird komplett zurueckgerollt.

    :return: (order_id, total)
    """
    try:
        cart_items = CartItem.query.filter_by(user_id=user_id).order_by(CartItem.id).all()
        if not cart_items:
            raise BadRequestError("Cart is empty")

        product_ids = {item.product_id for item in cart_items}
        products = {
            p.id: p
            for p in Product.query.filter(Product.id.in_(product_ids)).with_for_update().all()
        }

        # Bestand pruefen, Positionen in mehreren Groessen zusammengezaehlt
        needed = Counter()
        for item in cart_items:
            needed[item.product_id] += item.quantity
        for product_id, quantity in needed.items():
            product = products.get(product_id)
            if product is None or product.stock < quantity:
                raise BadRequestError(f"Insufficient stock for product ID {product_id}")

        address = db.session.get(Address, address_id) if address_id is not None else None
        if address is None or address.user_id != user_id:
            raise NotFoundError("Address not found")

        # Preise aus dem Snapshot oben, nicht spaeter nachladen
        prices = {pid: Decimal(p.price) for pid, p in products.items()}
        total = sum((prices[item.product_id] * item.quantity for item in cart_items), Decimal("0"))

        order = Order(
            user_id=user_id,
            address_id=address_id,
            total=total,
            payment_method=payment_method,
        )
        db.session.add(order)
        db.session.flush()

        db.session.add_all(
            OrderItem(
                order_id=order.id,
                product_id=item.product_id,
                quantity=item.quantity,
                size=item.size,
                unit_price=prices[item.product_id],
            )
            for item in cart_items
        )

        for item in cart_items:
            if not take_stock(item.product_id, item.quantity):
                raise BadRequestError(f"Insufficient stock for product ID {item.product_id}")

        # nur die Positionen aus dem Snapshot loeschen
        CartItem.query.filter(CartItem.id.in_([item.id for item in cart_items])).delete(
            synchronize_session=False
        )

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Bestellung {order.id} fuer User {user_id} angelegt, Summe {total}")
    return order.id, total
