# server/core/errors.py

from fastapi import status


# -------------------------------
# Error Taxonomy
# -------------------------------

class AuthError(Exception):
    """
    Base class for failures that are reported to the client.
    Each subclass fixes the HTTP status and a short, generic message.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingField(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "All fields required"


class DuplicateUser(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentials(AuthError):
    # Same message for unknown email and wrong password.
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class MissingToken(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token"


class InvalidToken(AuthError):
    # Covers expired, tampered and malformed tokens alike.
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class StoreUnavailable(AuthError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
