import logging
from typing import Any, Dict, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from portfolio_api.models.content import SINGLETON_ID
from portfolio_api.utils.time_utils import get_utc_time

logger = logging.getLogger(__name__)

ContentModel = TypeVar("ContentModel", bound=SQLModel)


def get_singleton(db: Session, model: Type[ContentModel]) -> Optional[ContentModel]:
    """Return the single row of a content table, or None if it was never saved."""
    return db.get(model, SINGLETON_ID)


def _apply(instance: SQLModel, data: Dict[str, Any]) -> None:
    for key, value in data.items():
        setattr(instance, key, value)
    instance.updated_at = get_utc_time()


def upsert_singleton(
    db: Session, model: Type[ContentModel], data: Dict[str, Any]
) -> ContentModel:
    """
    Create or replace the single row of a content table.

    The row always lives at SINGLETON_ID, so the primary key itself keeps the
    table to one row. If two first-time writes race, the loser's insert fails
    on the key and is retried as an update of the winner's row.

    Args:
        db: Database session for transaction management
        model: HeroSection, AboutSection or SiteSettings
        data: Complete field values; anything omitted has already been
              defaulted by the request schema

    Returns:
        The stored row reflecting ``data``
    """
    instance = db.get(model, SINGLETON_ID)

    if instance is None:
        instance = model(id=SINGLETON_ID, **data)
        db.add(instance)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(
                f"Concurrent create of {model.__name__}; retrying as update"
            )
            instance = db.get(model, SINGLETON_ID)
            _apply(instance, data)
            db.add(instance)
            db.commit()
        else:
            logger.info(f"{model.__name__} created")
    else:
        _apply(instance, data)
        db.add(instance)
        db.commit()
        logger.info(f"{model.__name__} updated")

    db.refresh(instance)
    return instance
