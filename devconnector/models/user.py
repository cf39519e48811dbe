# devconnector/models/user.py

from sqlalchemy import Column, Integer, String, DateTime, func
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for registered accounts.
    The unique index on email is the source of truth for duplicate detection.
    Only the bcrypt hash of the password is stored.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    avatar = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.email}>"
