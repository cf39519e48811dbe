# devconnector/core/accounts.py

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from devconnector.core.errors import DuplicateAccount
from devconnector.models.user import User


class AccountStore:
    """
    Session-scoped access to persisted accounts.
    Insert relies on the unique index on users.email, so a concurrent
    registration that slips past find_by_email still fails as a duplicate.
    """

    def __init__(self, db: Session):
        self._db = db

    def find_by_email(self, email: str) -> User | None:
        return self._db.query(User).filter(User.email == email).first()

    def insert(self, name: str, email: str, avatar: str, hashed_password: str) -> User:
        user = User(
            name=name,
            email=email,
            avatar=avatar,
            hashed_password=hashed_password,
        )
        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            if self.find_by_email(email) is not None:
                raise DuplicateAccount() from e
            raise
        except Exception:
            self._db.rollback()
            raise
        self._db.refresh(user)
        return user

    def delete(self, user: User):
        try:
            self._db.delete(user)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
