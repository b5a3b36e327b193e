import threading
from decimal import Decimal

from storefront import create_app
from storefront.models import CartItem, Product, db
from tests.conftest import login_headers


def test_concurrent_adds_lose_no_update(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'shop.db'}",
        "SQLALCHEMY_ENGINE_OPTIONS": {"connect_args": {"timeout": 30}},
        "JWT_SECRET": "test-secret",
    })
    with app.app_context():
        product = Product(name="Shirt", price=Decimal("19.99"), stock=10)
        db.session.add(product)
        db.session.commit()
        pid = product.id

    auth = login_headers(app.test_client())
    barrier = threading.Barrier(2)
    statuses = []

    def add_four():
        client = app.test_client()
        barrier.wait()
        res = client.post("/cart", headers=auth, json={"productId": pid, "quantity": 4, "size": "M"})
        statuses.append(res.status_code)

    threads = [threading.Thread(target=add_four) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert statuses == [200, 200]
    with app.app_context():
        assert db.session.get(Product, pid).stock == 2
        lines = CartItem.query.filter_by(product_id=pid).all()
        assert [line.quantity for line in lines] == [8]
        db.engine.dispose()
