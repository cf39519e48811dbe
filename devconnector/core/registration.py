# devconnector/core/registration.py

from dataclasses import dataclass

from devconnector.config import Settings
from devconnector.core.accounts import AccountStore
from devconnector.core.avatar import gravatar_url
from devconnector.core.errors import (
    DuplicateAccount,
    InternalFailure,
    SigningFailure,
    ValidationFailed,
)
from devconnector.core.security import PasswordHasher, TokenSigner


@dataclass(frozen=True)
class RegistrationInput:
    name: str
    email: str
    password: str


class CredentialIssuer:
    """
    Creates an account exactly once per email and returns a signed access token for it.

    Failures surface only as DuplicateAccount, ValidationFailed or InternalFailure;
    lower-level exceptions are chained as the cause for the caller to log.

    If signing fails after the account was written, the account is deleted again
    (compensating delete) so that a failed registration leaves no record behind.
    """

    def __init__(
        self,
        store: AccountStore,
        hasher: PasswordHasher,
        signer: TokenSigner,
        settings: Settings,
    ):
        self._store = store
        self._hasher = hasher
        self._signer = signer
        self._settings = settings

    def avatar_for(self, email: str) -> str:
        return gravatar_url(
            email,
            size=self._settings.gravatar_size,
            rating=self._settings.gravatar_rating,
            default=self._settings.gravatar_default,
        )

    def register(self, data: RegistrationInput) -> str:
        for value in (data.name, data.email, data.password):
            if not isinstance(value, str) or not value:
                raise ValidationFailed()

        try:
            existing = self._store.find_by_email(data.email)
        except Exception as e:
            raise InternalFailure() from e
        if existing is not None:
            raise DuplicateAccount()

        avatar = self.avatar_for(data.email)

        try:
            hashed_password = self._hasher.hash(data.password)
        except Exception as e:
            raise InternalFailure() from e

        # The unique index decides races between concurrent registrations
        try:
            user = self._store.insert(
                name=data.name,
                email=data.email,
                avatar=avatar,
                hashed_password=hashed_password,
            )
        except DuplicateAccount:
            raise
        except Exception as e:
            raise InternalFailure() from e

        try:
            return self._signer.issue(user.id)
        except SigningFailure as e:
            self._compensate(user)
            raise InternalFailure() from e

    def _compensate(self, user):
        try:
            self._store.delete(user)
        except Exception as e:
            raise InternalFailure() from e
