from ..models import Order, money


# --------------------------------
# Bestellungen abrufen
# --------------------------------
def list_orders(user_id):
    orders = (
        Order.query.filter_by(user_id=user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )

    return [
        {
            "order_id": order.id,
            "total": money(order.total),
            "created_at": order.created_at.isoformat(),
            "payment_method": order.payment_method,
            "address_id": order.address_id,
            "items": [
                {
                    "product_name": item.product.name,
                    "quantity": item.quantity,
                    "size": item.size,
                    "price": money(item.unit_price),
                    "image": item.product.image,
                    "description": item.product.description,
                }
                for item in order.items
            ],
        }
        for order in orders
    ]
