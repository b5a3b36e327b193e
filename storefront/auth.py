from datetime import datetime, timedelta, timezone
from functools import wraps

from flask import current_app, g, request
from jose import JWTError, jwt
from werkzeug.security import check_password_hash, generate_password_hash

from .errors import UnauthorizedError


# --------------------------------
# Passwort Hashing
# --------------------------------
def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, digest):
    return check_password_hash(digest, password)


# --------------------------------
# Token
# --------------------------------
def create_token(user_id, email):
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=current_app.config["TOKEN_EXPIRES_MINUTES"]
    )
    claims = {"id": user_id, "email": email, "exp": expire}
    return jwt.encode(
        claims,
        current_app.config["JWT_SECRET"],
        algorithm=current_app.config["JWT_ALGORITHM"],
    )


def decode_token(token):
    """Prueft Signatur und Ablauf, ohne die Datenbank zu fragen."""
    try:
        payload = jwt.decode(
            token,
            current_app.config["JWT_SECRET"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
        )
    except JWTError:
        raise UnauthorizedError("Invalid or expired token")

    if payload.get("id") is None:
        raise UnauthorizedError("Invalid or expired token")
    return {"id": payload["id"], "email": payload.get("email")}


def token_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            raise UnauthorizedError("No token provided")

        g.user = decode_token(token.strip())
        return view(*args, **kwargs)

    return wrapper
