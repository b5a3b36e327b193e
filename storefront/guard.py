from dataclasses import dataclass


# --------------------------------
# Auth-Zustaende
# --------------------------------
@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Authenticated:
    user: dict = None


@dataclass(frozen=True)
class Unauthenticated:
    pass


# --------------------------------
# Ergebnisse
# --------------------------------
@dataclass(frozen=True)
class Placeholder:
    text: str = "Loading..."


@dataclass(frozen=True)
class Redirect:
    to: str
    replace: bool = True


# --------------------------------
# Guard
# --------------------------------
def guard(state, content, entry="/"):
    if isinstance(state, Loading):
        return Placeholder()
    if isinstance(state, Authenticated):
        return content
    if isinstance(state, Unauthenticated):
        return Redirect(entry, replace=True)
    raise TypeError(f"Unbekannter Auth-Zustand: {state!r}")


def state_from_token(token, decode):
    # None: Token noch nicht geladen, "": kein Login
    if token is None:
        return Loading()
    if not token:
        return Unauthenticated()
    try:
        return Authenticated(decode(token))
    except Exception:
        return Unauthenticated()
