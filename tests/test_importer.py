from decimal import Decimal

import pytest

from storefront.importer import import_products, to_price
from storefront.models import Product, db


def write_csv(tmp_path, rows):
    path = tmp_path / "products.csv"
    path.write_text("name;price;stock;image;description\n" + "\n".join(rows) + "\n", encoding="utf-8")
    return path


def test_import_creates_and_updates(app, tmp_path):
    path = write_csv(tmp_path, ["Shirt;19,99;10;shirt.png;Cotton", "Mug;8.00;5;;"])

    with app.app_context():
        assert import_products(str(path)) == (2, 0)
        mug = Product.query.filter_by(name="Mug").first()
        assert mug.stock == 5
        assert mug.image is None

    path = write_csv(tmp_path, ["Shirt;21,50;3;shirt.png;Cotton"])
    with app.app_context():
        assert import_products(str(path)) == (0, 1)
        shirt = Product.query.filter_by(name="Shirt").first()
        assert shirt.price == Decimal("21.50")
        assert shirt.stock == 3


def test_negative_stock_aborts_import(app, tmp_path):
    path = write_csv(tmp_path, ["Shirt;19,99;10;;", "Mug;8.00;-1;;"])

    with app.app_context():
        with pytest.raises(ValueError):
            import_products(str(path))
        assert Product.query.count() == 0


def test_to_price():
    assert to_price("1,5") == Decimal("1.50")
    with pytest.raises(ValueError):
        to_price("abc")


def test_cli_import(app, tmp_path):
    path = write_csv(tmp_path, ["Cap;5,00;7;;"])
    result = app.test_cli_runner().invoke(args=["import-products", str(path)])
    assert result.exit_code == 0
    assert "1 Produkte neu" in result.output

    with app.app_context():
        assert db.session.query(Product).count() == 1
