from flask import Blueprint, g, jsonify
import logging

from ..auth import token_required
from ..services.checkout import checkout as place_order
from ..services.mail import send_order_confirmation
from ..services.orders import list_orders
from ..validation import json_body, positive_int, require_fields

logger = logging.getLogger(__name__)

orders_bp = Blueprint("orders", __name__)


# ----------------------------
# Neue Bestellung
# ----------------------------
@orders_bp.route("/checkout", methods=["POST"])
@token_required
def checkout():
    data = json_body()
    require_fields(data, "addressId", "paymentMethod")

    order_id, total = place_order(
        g.user["id"], positive_int(data["addressId"], "addressId"), data["paymentMethod"]
    )

    # Bestaetigung per E-Mail, Fehler blockieren die Bestellung nicht
    try:
        send_order_confirmation(g.user["email"], order_id, total)
    except Exception as e:
        logger.error(f"Bestellmail Fehler: {e}")

    return jsonify({"message": "Order placed successfully", "orderId": order_id}), 201


# ----------------------------
# Alle Bestellungen des Users
# ----------------------------
@orders_bp.route("/orders", methods=["GET"])
@token_required
def get_orders():
    return jsonify(list_orders(g.user["id"]))
