import logging

import click
from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .models import db

logger = logging.getLogger(__name__)


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)

    from .routes.addresses import addresses_bp
    from .routes.auth import auth_bp
    from .routes.cart import cart_bp
    from .routes.orders import orders_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(addresses_bp)
    app.register_blueprint(orders_bp)

    register_error_handlers(app)
    register_commands(app)

    with app.app_context():
        db.create_all()

    return app


def shutdown(app):
    """Schliesst den Connection-Pool der App."""
    with app.app_context():
        db.engine.dispose()
    logger.info("Datenbankverbindungen geschlossen")


def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        db.create_all()
        click.echo("Datenbank initialisiert")

    @app.cli.command("import-products")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    def import_products_command(path):
        from .importer import import_products

        created, updated = import_products(path)
        click.echo(f"{created} Produkte neu, {updated} aktualisiert")
