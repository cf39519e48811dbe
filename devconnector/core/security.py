# devconnector/core/security.py

from datetime import datetime, timedelta, timezone
from jose import jwt
from jose.exceptions import JOSEError
from passlib.context import CryptContext

from devconnector.config import Settings
from devconnector.core.errors import SigningFailure


# -------------------------------
# Password hashing
# -------------------------------

class PasswordHasher:
    """
    bcrypt hashing with a per-hash random salt embedded in the output.
    """

    def __init__(self, rounds: int):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            # Unrecognised or malformed hash
            return False


# -------------------------------
# Access tokens
# -------------------------------

class TokenSigner:
    """
    Issues HS256 (by default) JWTs carrying the account id as the only claim.
    The key and lifetime come from the Settings given at construction.
    """

    def __init__(self, settings: Settings):
        self._key = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._ttl = timedelta(seconds=settings.jwt_expires_seconds)

    def issue(self, account_id) -> str:
        if account_id is None or str(account_id) == "":
            raise SigningFailure("account id is required")

        now = datetime.now(timezone.utc)
        payload = {
            "user": {"id": str(account_id)},
            "iat": now,
            "exp": now + self._ttl,
        }
        try:
            return jwt.encode(payload, self._key, algorithm=self._algorithm)
        except (JOSEError, TypeError, ValueError) as e:
            raise SigningFailure(str(e)) from e

    def decode(self, token: str) -> dict:
        """
        Verifies signature and expiry and returns the claims.
        """
        try:
            return jwt.decode(token, self._key, algorithms=[self._algorithm])
        except JOSEError as e:
            raise SigningFailure("Invalid token") from e

    def account_id(self, token: str) -> str:
        claims = self.decode(token)
        try:
            return claims["user"]["id"]
        except (KeyError, TypeError) as e:
            raise SigningFailure("Token does not carry an account id") from e
