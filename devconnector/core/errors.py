# devconnector/core/errors.py


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing or invalid."""


class SigningFailure(RuntimeError):
    """The token signing primitive failed (bad key, bad claim, bad token)."""


# -------------------------------
# Registration outcomes
# -------------------------------

class RegistrationError(Exception):
    """
    Base class for every failed registration.
    `errors` has the same shape as field-validation errors: a list of {"msg": ...}.
    """
    message = "Registration failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.errors = [{"msg": message or self.message}]


class RegistrationRejected(RegistrationError):
    """The registration was refused for a reason the end user can fix."""


class ValidationFailed(RegistrationRejected):
    message = "Invalid registration input"


class DuplicateAccount(RegistrationRejected):
    message = "User already exists"


class InternalFailure(RegistrationError):
    message = "Server error"
