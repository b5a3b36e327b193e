import atexit

from storefront import create_app, shutdown
from storefront.models import db


def test_factory_registers_no_exit_hook(monkeypatch):
    hooks = []
    monkeypatch.setattr(atexit, "register", lambda *args: hooks.append(args))

    create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"})
    assert hooks == []


def test_shutdown_disposes_pool():
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"})
    shutdown(app)
    with app.app_context():
        # nach dispose baut der Pool neue Verbindungen auf
        assert db.session.execute(db.text("SELECT 1")).scalar() == 1
