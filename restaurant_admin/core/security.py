from datetime import datetime, timedelta, timezone
from jose import jwt
from restaurant_admin.core.config import settings

def create_access_token(subject: str, role: str | None = None) -> str:
    # Mirrors the tokens minted by the auth service; used by the test suite
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=settings.jwt_access_ttl_min)
    payload = {
        "sub": subject,
        "role": role or settings.admin_role,
        "iat": int(now.timestamp()), # issued at
        "exp": int(exp.timestamp()), # expiration time
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_alg)

def decode_token(token: str) -> dict:
    # Returns the token payload if valid, raises JWTError if invalid
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_alg])
