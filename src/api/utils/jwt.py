from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from config import ApplicationConfig

ALGORITHM = "HS256"


def create_token(
    claims: Dict[str, Any],
    secret_key: str,
    audience: str,
    issuer: str,
    lifetime: timedelta,
) -> str:
    """
    Create a signed, time-bounded JWT

    Args:
        claims: Identity claims (id, login, email, role)
        secret_key: HMAC signing key
        audience: Expected token audience
        issuer: Token issuer
        lifetime: Token expiration duration

    Returns:
        JWT token string (HS256)

    Raises:
        ValueError: If secret_key is missing
    """
    if not secret_key:
        raise ValueError("Token secret key is required")

    now = datetime.now(UTC)
    payload = {
        **claims,
        "iss": issuer,
        "aud": audience,
        "exp": now + lifetime,
        "iat": now,
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def create_access_token(claims: Dict[str, Any], config=ApplicationConfig) -> str:
    """Create an access token using the configured Authorization settings"""
    return create_token(
        claims,
        secret_key=config.AUTH_SECRET_KEY,
        audience=config.AUTH_AUDIENCE,
        issuer=config.AUTH_ISSUER,
        lifetime=timedelta(minutes=config.AUTH_LIFETIME_MINUTES),
    )


def verify_jwt(token: str, config=ApplicationConfig) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        config: Settings holding the secret, audience and issuer

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            config.AUTH_SECRET_KEY,
            algorithms=[ALGORITHM],
            audience=config.AUTH_AUDIENCE,
            issuer=config.AUTH_ISSUER,
        )
        return payload
    except JWTError:
        return None
