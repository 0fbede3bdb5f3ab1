import validators

from .errors import InvalidUserError

_FORBIDDEN = ("/", "\\")


def normalize_user(s: str) -> str:
    if s is None:
        raise InvalidUserError("user is required")
    s = str(s).strip(" ")
    if not s:
        raise InvalidUserError("empty user")

    if any(ch.isspace() for ch in s):
        raise InvalidUserError("spaces in user")

    # идёт и в путь запроса, и в имя файла
    if any(ch in s for ch in _FORBIDDEN):
        raise InvalidUserError(f"path separator in user: {s!r}")
    return s


def user_kind(s: str) -> str:
    """Classify an identifier the way the API resolves it: id, email or @mention."""
    if s.isdigit():
        return "id"
    if validators.email(s) is True:
        return "email"
    return "mention"
