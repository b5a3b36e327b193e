import csv
import logging
from decimal import Decimal, InvalidOperation

from .models import Product, db

logger = logging.getLogger(__name__)


def to_price(value):
    try:
        return Decimal(str(value).strip().replace(",", ".")).quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValueError(f"invalid price: {value!r}")


def to_stock(value):
    stock = int(str(value).strip() or 0)
    if stock < 0:
        raise ValueError(f"negative stock: {value!r}")
    return stock


def read_products(path):
    with open(path, newline="", encoding="utf-8") as csvfile:
        reader = csv.DictReader(csvfile, delimiter=";")
        for row in reader:
            yield {
                "name": row["name"].strip(),
                "price": to_price(row["price"]),
                "stock": to_stock(row["stock"]),
                "image": row.get("image") or None,
                "description": row.get("description") or None,
            }


def import_products(path):
    """Importiert Produkte aus einer CSV, bestehende werden per Name aktualisiert.

    :return: (neu, aktualisiert)
    """
    created = updated = 0
    try:
        for data in read_products(path):
            product = Product.query.filter_by(name=data["name"]).first()
            if product:
                for key, value in data.items():
                    setattr(product, key, value)
                updated += 1
            else:
                db.session.add(Product(**data))
                created += 1
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Produktimport aus {path}: {created} neu, {updated} aktualisiert")
    return created, updated
