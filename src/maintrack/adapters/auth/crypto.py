from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

DEV_SECRET_KEY = "dev-secret-unsafe"
ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class JWTAuthAdapter:
    """
    Auth adapter: HS256 JWT bearer tokens (python-jose) and argon2 password
    hashes (passlib).

    The token subject is the user id; the lifetime is passed per call from
    ``rules.auth.access_token_ttl_minutes``.
    """

    def __init__(self, secret_key: str = DEV_SECRET_KEY) -> None:
        self.secret_key = secret_key

    def hash_password(self, password: str) -> str:
        result: str = pwd_context.hash(password)
        return result

    def verify_password(self, plain: str, hashed: str) -> bool:
        result: bool = pwd_context.verify(plain, hashed)
        return result

    def create_token(self, user_id: Any, ttl_minutes: int) -> str:
        expire = datetime.now(UTC) + timedelta(minutes=ttl_minutes)
        token: str = jwt.encode(
            {"sub": str(user_id), "exp": expire}, self.secret_key, algorithm=ALGORITHM
        )
        return token

    def validate_token(self, token: str) -> str | None:
        """The token's user id, or None when the signature or expiry check fails."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None
        sub = payload.get("sub")
        return sub if isinstance(sub, str) else None
