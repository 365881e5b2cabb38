from __future__ import annotations

import datetime
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from Security.activity_logging import get_file_logger

from .database import get_db
from .models import Contact
from .schemas import ContactDetails

logger = get_file_logger("contacts.app", "app.log")


def parse_contact_id(value) -> Optional[int]:
    try:
        contact_id = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return contact_id if contact_id > 0 else None


class ContactsRepository:
    """
    CRUD over the contacts table.
    Write failures are rolled back, logged, and reported as None/False.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all_contacts(self) -> list[Contact]:
        return self.db.query(Contact).order_by(Contact.id.asc()).all()

    def get_contact_by_id(self, contact_id) -> Optional[Contact]:
        pk = parse_contact_id(contact_id)
        if pk is None:
            return None
        return self.db.query(Contact).filter(Contact.id == pk).first()

    def create_contact(self, details: ContactDetails) -> Optional[Contact]:
        contact = Contact(
            first_name=details.first_name,
            last_name=details.last_name,
            email_address=details.email_address,
            notes=details.notes,
        )
        try:
            self.db.add(contact)
            self.db.commit()
            self.db.refresh(contact)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("create_contact failed name=%s %s", details.first_name, details.last_name)
            return None
        return contact

    def update_contact(self, contact_id, details: ContactDetails) -> bool:
        contact = self.get_contact_by_id(contact_id)
        if not contact:
            return False
        contact.first_name = details.first_name
        contact.last_name = details.last_name
        contact.email_address = details.email_address
        contact.notes = details.notes
        contact.updated_at = datetime.datetime.utcnow()
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("update_contact failed id=%s", contact_id)
            return False
        return True

    def delete_contact(self, contact_id) -> bool:
        contact = self.get_contact_by_id(contact_id)
        if not contact:
            return False
        try:
            self.db.delete(contact)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("delete_contact failed id=%s", contact_id)
            return False
        return True


def get_contacts_repository(db: Session = Depends(get_db)) -> ContactsRepository:
    return ContactsRepository(db)
