import logging

from sqlalchemy.exc import IntegrityError

from ..auth import create_token, hash_password, verify_password
from ..errors import ConflictError, NotFoundError, UnauthorizedError
from ..models import User, db

logger = logging.getLogger(__name__)


# --------------------------------
# Registrierung
# --------------------------------
def signup(name, email, password, phone):
    if User.query.filter_by(email=email).first():
        raise ConflictError("User already exists")

    user = User(name=name, email=email, password=hash_password(password), phone=phone)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("User already exists")
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"Neuer Benutzer registriert: {email}")
    return user.to_dict()


# --------------------------------
# Login
# --------------------------------
def login(email, password):
    user = User.query.filter_by(email=email).first()
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(password, user.password):
        raise UnauthorizedError("Incorrect password")

    return create_token(user.id, user.email)
