from decimal import Decimal

import pytest

from storefront import create_app
from storefront.models import Product, db


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "JWT_SECRET": "test-secret",
        "SENDGRID_API_KEY": None,
        "EMAIL_SENDER": None,
    })
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_product(app):
    def _make(name="T-Shirt", price="19.99", stock=10, image="shirt.png", description="Cotton"):
        with app.app_context():
            product = Product(name=name, price=Decimal(price), stock=stock, image=image, description=description)
            db.session.add(product)
            db.session.commit()
            return product.id
    return _make


@pytest.fixture
def stock_of(app):
    def _stock(product_id):
        with app.app_context():
            return db.session.get(Product, product_id).stock
    return _stock


def register(client, email="anna@example.com", password="geheim123", name="Anna", phone="0151"):
    return client.post("/signup", json={"name": name, "email": email, "password": password, "phone": phone})


def login_headers(client, email="anna@example.com", password="geheim123"):
    register(client, email=email, password=password)
    res = client.post("/login", json={"email": email, "password": password})
    return {"Authorization": f"Bearer {res.get_json()['token']}"}


@pytest.fixture
def auth(client):
    return login_headers(client)


@pytest.fixture
def address_id(client, auth):
    res = client.post("/addresses", headers=auth, json={
        "fullName": "Anna Muster",
        "phonenumber": "0151 123",
        "line1": "Hauptstr. 1",
        "line2": "",
        "city": "Berlin",
        "state": "BE",
        "pincode": "10115",
    })
    return res.get_json()["id"]
