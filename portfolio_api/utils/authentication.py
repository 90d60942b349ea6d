import logging
from datetime import timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from portfolio_api.config import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    FALLBACK_JWT_SECRET,
    JWT_ALGORITHM,
    JWT_SECRET,
)
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)

# Constants
SECRET_KEY = JWT_SECRET
ALGORITHM = JWT_ALGORITHM

if SECRET_KEY == FALLBACK_JWT_SECRET:
    logger.warning(
        "JWT_SECRET is not set; signing admin tokens with the built-in fallback "
        "secret. Anyone who knows it can forge tokens. Set JWT_SECRET in production."
    )


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be turned back into an admin id."""


def create_access_token(admin_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT for the given admin, valid for 24 hours by default."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    issued_at = get_utc_time()
    to_encode = {
        "sub": str(admin_id),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Verify a bearer token and return the admin id it was issued for.

    The cause of a failure (expired, bad signature, garbage input) is only
    logged here; callers receive a single InvalidTokenError and must answer
    the client with a generic unauthorized response.
    """
    try:
        payload = jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError:
        logger.info("Rejected bearer token: expired")
        raise InvalidTokenError("expired")
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise InvalidTokenError("invalid")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        logger.info("Rejected bearer token: missing or non-numeric subject")
        raise InvalidTokenError("malformed")
