import logging

from ..models import Address, db

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("full_name", "phone", "line1", "line2", "city", "state", "pincode")


def list_addresses(user_id):
    addresses = (
        Address.query.filter_by(user_id=user_id)
        .order_by(Address.created_at.desc(), Address.id.desc())
        .all()
    )
    return [a.to_dict() for a in addresses]


def add_address(user_id, fields):
    address = Address(user_id=user_id, **{k: fields.get(k) for k in ADDRESS_FIELDS})
    db.session.add(address)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Neue Adresse {address.id} fuer User {user_id}")
    return address.to_dict()
