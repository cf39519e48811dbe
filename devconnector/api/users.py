# devconnector/api/users.py

import logging
from pydantic import BaseModel, EmailStr, Field, field_validator
from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from devconnector.database import get_db
from devconnector.core.accounts import AccountStore
from devconnector.core.errors import InternalFailure, RegistrationRejected
from devconnector.core.registration import CredentialIssuer, RegistrationInput


logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------------------
# Request / Response Schemas
# -------------------------------

class RegisterRequest(BaseModel):
    """
    Request body for account registration.
    """
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, value: str) -> str:
        # bcrypt cannot hash NUL characters
        if "\x00" in value:
            raise ValueError("Password must not contain NUL characters")
        return value


class Token(BaseModel):
    token: str


FIELD_MESSAGES = {
    "name": "Name is required",
    "email": "Please include a valid email",
    "password": "Please enter a password with 6 or more characters",
}


def validation_error_items(exc: RequestValidationError) -> list[dict]:
    """
    Flattens pydantic errors into one {"msg", "param", "location"} entry per field.
    """
    items = []
    seen = set()
    for error in exc.errors():
        loc = error.get("loc", ())
        location = loc[0] if loc else "body"
        param = loc[1] if len(loc) > 1 else None
        if param in seen:
            continue
        seen.add(param)
        msg = FIELD_MESSAGES.get(param, "Invalid request body")
        if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
            msg = str(error["ctx"]["error"])
        items.append({
            "msg": msg,
            "param": param,
            "location": location,
        })
    return items


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": validation_error_items(exc)}
    )


# -------------------------------
# Dependencies
# -------------------------------

def get_issuer(request: Request, db: Session = Depends(get_db)) -> CredentialIssuer:
    state = request.app.state
    return CredentialIssuer(
        store=AccountStore(db),
        hasher=state.password_hasher,
        signer=state.token_signer,
        settings=state.settings,
    )


# -------------------------------
# Registration Endpoint
# -------------------------------

@router.post("/api/users", response_model=Token)
def register(req: RegisterRequest, issuer: CredentialIssuer = Depends(get_issuer)):
    """
    Registers a new account and returns a signed access token for it.
    Duplicate emails are rejected with the same error shape as field validation.
    """
    data = RegistrationInput(name=req.name, email=req.email, password=req.password)
    try:
        token = issuer.register(data)
    except RegistrationRejected as e:
        logger.info("Registration rejected: %s", e)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": e.errors}
        )
    except InternalFailure as e:
        logger.exception("Registration failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"errors": e.errors}
        )

    logger.info("Registered new account")
    return {"token": token}
