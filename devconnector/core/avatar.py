# devconnector/core/avatar.py

import hashlib
from urllib.parse import urlencode


GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def gravatar_url(email: str, size: int, rating: str, default: str) -> str:
    """
    Builds the public Gravatar URL for an email address.
    Gravatar keys avatars by the MD5 of the trimmed, lower-cased address.
    """
    email_md5 = hashlib.md5(_normalize_email(email).encode("utf-8")).hexdigest()  # nosec - public hash
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}/{email_md5}?{query}"
