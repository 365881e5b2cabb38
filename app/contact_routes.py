from fastapi import Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from Security.audit_trail import audit
from Security.input_validation import CONTACT_FIELDS, EMAIL_ADDRESS, FIRST_NAME, LAST_NAME, NOTES

from .app_context import templates
from .contact_gate import check_contact_submission
from .contacts_repository import ContactsRepository, get_contacts_repository
from .models import Contact


async def read_field_map(request: Request) -> dict:
    """Submitted contact fields; missing fields stay missing."""
    form = await request.form()
    field_map = {}
    for name in CONTACT_FIELDS:
        value = form.get(name)
        if isinstance(value, str):
            field_map[name] = value
    return field_map


def field_map_from_contact(contact: Contact) -> dict:
    return {
        FIRST_NAME: contact.first_name,
        LAST_NAME: contact.last_name,
        EMAIL_ADDRESS: contact.email_address or "",
        NOTES: contact.notes or "",
    }


def _require_contact(repo: ContactsRepository, contact_id: str, detail: str = "Contact not found") -> Contact:
    contact = repo.get_contact_by_id(contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail=detail)
    return contact


def register_contact_routes(app):
    @app.get("/")
    def root_redirect():
        return RedirectResponse("/contacts", status_code=303)

    @app.get("/contacts", response_class=HTMLResponse)
    async def list_contacts(request: Request, repo: ContactsRepository = Depends(get_contacts_repository)):
        contacts = repo.get_all_contacts()
        return templates.TemplateResponse(request, "contacts/index.html", {"contacts": contacts})

    @app.get("/contacts/new", response_class=HTMLResponse)
    async def new_contact_form(request: Request):
        return templates.TemplateResponse(request, "contacts/new.html", {"values": {}})

    @app.post("/contacts")
    async def create_contact(request: Request, repo: ContactsRepository = Depends(get_contacts_repository)):
        field_map = await read_field_map(request)
        outcome = check_contact_submission(field_map)
        if not outcome.accepted:
            return templates.TemplateResponse(request, "contacts/new.html", {
                "values": field_map,
                "error_message": outcome.verdict.error_message,
                "failures": outcome.verdict.failures,
            })

        created = repo.create_contact(outcome.contact)
        if not created:
            raise HTTPException(status_code=500, detail="Failed to create contact")
        audit("contact_created", contact_id=created.id)
        return RedirectResponse("/contacts", status_code=303)

    @app.get("/contacts/generated/{contact_id}", response_class=HTMLResponse)
    async def show_generated_contact(
        request: Request,
        contact_id: str,
        repo: ContactsRepository = Depends(get_contacts_repository),
    ):
        contact = _require_contact(repo, contact_id, detail="Generated Contact not found")
        return templates.TemplateResponse(request, "contacts/show.html", {"contact": contact})

    @app.get("/contacts/{contact_id}", response_class=HTMLResponse)
    async def show_contact(
        request: Request,
        contact_id: str,
        repo: ContactsRepository = Depends(get_contacts_repository),
    ):
        contact = _require_contact(repo, contact_id)
        return templates.TemplateResponse(request, "contacts/show.html", {"contact": contact})

    @app.get("/contacts/{contact_id}/edit", response_class=HTMLResponse)
    async def edit_contact_form(
        request: Request,
        contact_id: str,
        repo: ContactsRepository = Depends(get_contacts_repository),
    ):
        contact = _require_contact(repo, contact_id)
        return templates.TemplateResponse(request, "contacts/edit.html", {
            "contact": contact,
            "values": field_map_from_contact(contact),
        })

    @app.api_route("/contacts/{contact_id}", methods=["POST", "PUT", "PATCH"])
    async def update_contact(
        request: Request,
        contact_id: str,
        repo: ContactsRepository = Depends(get_contacts_repository),
    ):
        field_map = await read_field_map(request)
        outcome = check_contact_submission(field_map)
        if not outcome.accepted:
            contact = _require_contact(repo, contact_id)
            return templates.TemplateResponse(request, "contacts/edit.html", {
                "contact": contact,
                "values": field_map,
                "error_message": outcome.verdict.error_message,
                "failures": outcome.verdict.failures,
            })

        existing = _require_contact(repo, contact_id)
        if not repo.update_contact(existing.id, outcome.contact):
            raise HTTPException(status_code=500, detail="Failed to update contact")
        audit("contact_updated", contact_id=existing.id)
        return RedirectResponse(f"/contacts/{existing.id}", status_code=303)

    @app.post("/contacts/{contact_id}/delete")
    @app.delete("/contacts/{contact_id}")
    async def delete_contact(contact_id: str, repo: ContactsRepository = Depends(get_contacts_repository)):
        if not repo.delete_contact(contact_id):
            raise HTTPException(status_code=500, detail="Failed to delete contact")
        audit("contact_deleted", details=f"id={contact_id}")
        return RedirectResponse("/contacts", status_code=303)
