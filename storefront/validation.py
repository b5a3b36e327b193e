from flask import request

from .errors import BadRequestError

# Obergrenze fuer INTEGER-Spalten
MAX_INT = 2**31 - 1


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequestError("Invalid JSON body")
    return data


def require_fields(data, *names):
    missing = [n for n in names if data.get(n) in (None, "")]
    if missing:
        raise BadRequestError(f"Missing fields: {', '.join(missing)}")


def positive_int(value, name):
    # bool ist auch ein int
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_INT:
        raise BadRequestError(f"{name} must be a positive integer")
    return value


def optional_size(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise BadRequestError("size must be a string")
    return value
