import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ShopError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConflictError(ShopError):
    # Doppelte Registrierung wird als 400 beantwortet
    status_code = 400


class NotFoundError(ShopError):
    status_code = 404


class BadRequestError(ShopError):
    status_code = 400


class UnauthorizedError(ShopError):
    status_code = 401


def register_error_handlers(app):

    @app.errorhandler(ShopError)
    def handle_shop_error(e):
        return jsonify({"message": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception(f"Unerwarteter Fehler: {e}")
        return jsonify({"error": "Internal Server Error"}), 500
