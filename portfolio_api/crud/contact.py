import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import selectinload
from sqlmodel import Session, func, select

from portfolio_api.models.contact import Contact, Reply
from portfolio_api.schemas.contact import ContactCreate

logger = logging.getLogger(__name__)


def create_contact(db: Session, contact: ContactCreate) -> Contact:
    """
    Store a contact form submission.

    New submissions always start unread; the client cannot set the flag.
    """
    db_contact = Contact(
        name=contact.name,
        email=contact.email,
        message=contact.message,
        read=False,
    )

    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)

    logger.info(f"Contact {db_contact.id} received from {db_contact.email}")
    return db_contact


def get_contacts(db: Session) -> list[Contact]:
    """
    Retrieve all submissions, newest first, with their replies loaded.

    Replies come back in the order they were written.
    """
    query = (
        select(Contact)
        .options(selectinload(Contact.replies))
        .order_by(Contact.created_at.desc(), Contact.id.desc())
    )
    return db.exec(query).all()


def get_contact(db: Session, contact_id: int) -> Contact:
    """
    Retrieve one submission by ID.

    Raises:
        HTTPException: 404 error if the contact does not exist
    """
    contact = db.get(Contact, contact_id)
    if contact is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contact not found",
        )
    return contact


def count_unread(db: Session) -> int:
    query = select(func.count()).select_from(Contact).where(Contact.read == False)  # noqa: E712
    return db.exec(query).one()


def mark_contact_read(db: Session, contact_id: int) -> Contact:
    contact = get_contact(db, contact_id)

    contact.read = True
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def add_reply(db: Session, contact_id: int, message: str) -> Contact:
    """
    Append a reply to a submission and mark the submission read.

    Both changes are committed together. Replies are never edited or
    removed on their own; they go away only when the contact is deleted.

    Args:
        db: Database session for transaction management
        contact_id: ID of the contact being answered
        message: Reply body as typed by the admin

    Returns:
        Contact: The updated contact with its replies in creation order

    Raises:
        HTTPException: 404 error if the contact does not exist
    """
    contact = get_contact(db, contact_id)

    reply = Reply(contact_id=contact.id, message=message)
    contact.read = True

    db.add(reply)
    db.add(contact)
    db.commit()
    db.refresh(contact)

    logger.info(f"Reply {reply.id} added to contact {contact_id}")
    return contact


def delete_contact(db: Session, contact_id: int) -> bool:
    """Delete a submission together with its replies."""
    contact = db.get(Contact, contact_id)
    if contact is None:
        return False

    db.delete(contact)
    db.commit()
    logger.info(f"Contact {contact_id} deleted")
    return True
