import logging
from typing import Generator, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session, SQLModel, create_engine

from portfolio_api.config import DATABASE_URL, SQL_ECHO
from portfolio_api.crud.admin import get_admin
from portfolio_api.models.admin import Admin
from portfolio_api.utils.authentication import InvalidTokenError, decode_access_token

logger = logging.getLogger(__name__)

# Database configuration
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, echo=SQL_ECHO)

# Missing headers are reported by get_current_admin itself, not by the scheme
bearer_scheme = HTTPBearer(auto_error=False)


def create_db_and_tables():
    """Create database and tables if they don't exist"""
    SQLModel.metadata.create_all(engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency for getting the database session."""
    with Session(engine) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


async def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Admin:
    """
    Gate for protected routes.

    Reads the ``Authorization: Bearer <token>`` header, verifies the token and
    loads the admin it names. On success the admin id is put on
    ``request.state.admin_id``. Every failure ends the request with a 401
    before the route handler runs; the response never says whether the token
    was expired, tampered with or malformed.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        admin_id = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise credentials_exception

    admin = get_admin(db, admin_id)
    if admin is None:
        logger.info(f"Rejected bearer token: admin {admin_id} no longer exists")
        raise credentials_exception

    request.state.admin_id = admin.id
    return admin
