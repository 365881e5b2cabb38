from pydantic import BaseModel, ConfigDict

from Security.input_validation import EMAIL_ADDRESS, FIRST_NAME, LAST_NAME, NOTES


class ContactDetails(BaseModel):
    """Sanitized contact values handed from the controller to the repository."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email_address: str = ""
    notes: str = ""

    @classmethod
    def from_field_map(cls, data: dict) -> "ContactDetails":
        return cls(
            first_name=data[FIRST_NAME],
            last_name=data[LAST_NAME],
            email_address=data.get(EMAIL_ADDRESS, ""),
            notes=data.get(NOTES, ""),
        )
