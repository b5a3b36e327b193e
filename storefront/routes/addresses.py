from flask import Blueprint, g, jsonify

from ..auth import token_required
from ..services import addresses as address_service
from ..validation import json_body

addresses_bp = Blueprint("addresses", __name__)


@addresses_bp.route("/addresses", methods=["GET"])
@token_required
def list_addresses():
    return jsonify(address_service.list_addresses(g.user["id"]))


@addresses_bp.route("/addresses", methods=["POST"])
@token_required
def add_address():
    data = json_body()
    fields = {
        "full_name": data.get("fullName"),
        "phone": data.get("phonenumber"),
        "line1": data.get("line1"),
        "line2": data.get("line2"),
        "city": data.get("city"),
        "state": data.get("state"),
        "pincode": data.get("pincode"),
    }
    return jsonify(address_service.add_address(g.user["id"], fields)), 201
