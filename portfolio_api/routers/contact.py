import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from portfolio_api.crud.contact import (
    add_reply,
    count_unread,
    create_contact,
    delete_contact,
    get_contacts,
    mark_contact_read,
)
from portfolio_api.dependencies import get_current_admin, get_db
from portfolio_api.schemas.base import MessageResponse
from portfolio_api.schemas.contact import (
    ContactCreate,
    ContactRead,
    ReplyCreate,
    UnreadCount,
)
from portfolio_api.services import email_service

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="/api/contacts",
    tags=["contacts"],
)


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def submit_contact_endpoint(contact: ContactCreate, db: Session = Depends(get_db)):
    """
    Submit the public contact form.

    The message is stored unread and a confirmation email is sent to the
    visitor. A failed email is logged; the submission still succeeds.

    Access Level: PUBLIC
    """
    db_contact = create_contact(db=db, contact=contact)
    result = ContactRead.model_validate(db_contact)

    email_sent = email_service.send_contact_confirmation(
        name=db_contact.name, email=db_contact.email
    )
    if not email_sent:
        logger.error(f"Failed to send confirmation email for contact {db_contact.id}")

    return result


@router.get("", response_model=List[ContactRead])
def read_contacts_endpoint(
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Retrieve all contact submissions with their replies.

    Access Level: ADMIN only
    """
    return [ContactRead.model_validate(contact) for contact in get_contacts(db)]


@router.get("/unread", response_model=UnreadCount)
def read_unread_count_endpoint(
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    return {"count": count_unread(db)}


@router.put("/{contact_id}/read", response_model=ContactRead)
def mark_read_endpoint(
    contact_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    contact = mark_contact_read(db, contact_id=contact_id)
    return ContactRead.model_validate(contact)


@router.post("/{contact_id}/reply", response_model=ContactRead)
def reply_endpoint(
    contact_id: int,
    reply: ReplyCreate,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    """
    Reply to a contact submission.

    The reply is saved and the contact marked read before the email goes out,
    so an email failure is only logged and never undoes the reply.

    Access Level: ADMIN only
    """
    contact = add_reply(db, contact_id=contact_id, message=reply.message)
    result = ContactRead.model_validate(contact)

    email_sent = email_service.send_reply_notification(
        name=contact.name, email=contact.email, message=reply.message
    )
    if not email_sent:
        logger.error(f"Failed to send reply email for contact {contact_id}")

    return result


@router.delete("/{contact_id}", response_model=MessageResponse)
def delete_contact_endpoint(
    contact_id: int,
    db: Session = Depends(get_db),
    current_admin=Depends(get_current_admin),
):
    success = delete_contact(db, contact_id=contact_id)
    if not success:
        raise HTTPException(status_code=404, detail="Contact not found")
    return {"message": "Contact deleted successfully"}
