from sqlalchemy import Column, Integer, String, DateTime, Text
from .database import Base
import datetime


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email_address = Column(String(255), nullable=False, default="")
    # Sanitized HTML, rendered as markup on the detail page
    notes = Column(Text, nullable=False, default="")

    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Contact id={self.id} name={self.full_name!r}>"
