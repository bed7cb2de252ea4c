# server/core/auth.py

from server.core.errors import (
    DuplicateUser,
    InvalidCredentials,
    MissingField,
    MissingToken,
    StoreUnavailable,
)
from server.core.security import PasswordHasher, TokenService
from server.core.users import UserStore
from server.logger import get_logger
from server.models.user import UserProfile, UserRecord


logger = get_logger("auth")


class AuthService:
    """
    Register, login and protected-resource checks.
    Each method is a straight sequence of steps; any failing step raises an AuthError.
    """

    def __init__(self, store: UserStore, hasher: PasswordHasher, tokens: TokenService):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def register(self, name: str | None, email: str | None, password: str | None) -> str:
        if not name or not email or not password:
            raise MissingField()

        try:
            if self.store.find_by_email(email) is not None:
                raise DuplicateUser()

            record = UserRecord(
                name=name,
                email=email,
                password_hash=self.hasher.hash(password),
            )
            user_id = self.store.insert(record)
        except StoreUnavailable:
            raise StoreUnavailable("Server error during registration")

        logger.info("Registered user %s", email)
        return user_id

    def login(self, email: str | None, password: str | None) -> tuple[str, UserProfile]:
        if not email or not password:
            raise InvalidCredentials()

        try:
            user = self.store.find_by_email(email)
        except StoreUnavailable:
            raise StoreUnavailable("Server error during login")

        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Rejected login for %s", email)
            raise InvalidCredentials()

        token = self.tokens.issue(user.id)
        return token, UserProfile(name=user.name, email=user.email)

    def authorize(self, authorization: str | None) -> str:
        """
        Resolves an Authorization header value to the user id carried by its token.
        The token is the second space-separated part of the header; no database access.
        """
        if not authorization:
            raise MissingToken()
        parts = authorization.split(" ")
        token = parts[1] if len(parts) > 1 else ""
        return self.tokens.verify(token)
