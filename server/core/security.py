# server/core/security.py

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext

from server.core.errors import InvalidToken


# -------------------------------
# Password Hashing
# -------------------------------

class PasswordHasher:
    """
    Salted bcrypt hashing. Every call to hash() draws a fresh salt, so the same
    password never produces the same stored string twice.
    """

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        if not plain_password or not hashed_password:
            return False
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # unrecognised or corrupted hash
            return False


# -------------------------------
# Token Issuing / Verification
# -------------------------------

class TokenService:
    """
    Issues and checks HS256 bearer tokens of the form {"sub": <user id>, "exp": <expiry>}.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise RuntimeError("Token signing secret is not configured")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)

    def issue(self, user_id: str, expires_delta: timedelta | None = None) -> str:
        if expires_delta is None:
            expires_delta = self.expires_delta
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"sub": str(user_id), "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidToken()
        user_id = payload.get("sub")
        if not user_id:
            raise InvalidToken()
        return user_id
