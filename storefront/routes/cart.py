from flask import Blueprint, g, jsonify

from ..auth import token_required
from ..services import cart as cart_service
from ..validation import json_body, optional_size, positive_int, require_fields

cart_bp = Blueprint("cart", __name__)


@cart_bp.route("/cart", methods=["GET"])
@token_required
def get_cart():
    return jsonify(cart_service.list_cart(g.user["id"]))


@cart_bp.route("/cart", methods=["POST"])
@token_required
def add_to_cart():
    data = json_body()
    require_fields(data, "productId", "quantity")

    cart_service.add_to_cart(
        g.user["id"],
        positive_int(data["productId"], "productId"),
        positive_int(data["quantity"], "quantity"),
        optional_size(data.get("size")) or "",
    )
    return jsonify({"message": "Item added to cart and stock updated"})


@cart_bp.route("/cart/<int:item_id>", methods=["PUT"])
@token_required
def update_cart_item(item_id):
    data = json_body()
    quantity = data.get("quantity")
    if quantity is not None:
        positive_int(quantity, "quantity")

    item = cart_service.update_cart_item(
        g.user["id"], item_id, quantity=quantity, size=optional_size(data.get("size"))
    )
    return jsonify({"message": "Cart item updated successfully and stock adjusted", "item": item})


@cart_bp.route("/cart/<int:item_id>", methods=["DELETE"])
@token_required
def remove_from_cart(item_id):
    cart_service.remove_from_cart(g.user["id"], item_id)
    return jsonify({"message": "Item removed from cart and stock restored"})
