"""
Run database schema creation and optional sample data seeding manually.
Usage: python -m app.manage_db [--seed]
"""
import argparse

from .contact_gate import check_contact_submission
from .contacts_repository import ContactsRepository
from .database import SessionLocal
from .main import create_tables

SAMPLE_CONTACTS = [
    {"firstName": "Ada", "lastName": "Lovelace", "emailAddress": "ada@example.com",
     "notes": "<b>First</b> programmer."},
    {"firstName": "Alan", "lastName": "Turing", "emailAddress": "alan@example.com",
     "notes": "See <a href=\"https://en.wikipedia.org/wiki/Alan_Turing\">biography</a>."},
    {"firstName": "Grace", "lastName": "Hopper", "emailAddress": "",
     "notes": "<em>Amazing</em> Grace."},
]


def seed_contacts() -> int:
    db = SessionLocal()
    created = 0
    try:
        repo = ContactsRepository(db)
        for field_map in SAMPLE_CONTACTS:
            outcome = check_contact_submission(field_map)
            if not outcome.accepted:
                print(f"Skipped sample {field_map['firstName']}: {outcome.verdict.error_message}")
                continue
            if repo.create_contact(outcome.contact):
                created += 1
    finally:
        db.close()
    return created


def main(argv=None):
    parser = argparse.ArgumentParser(description="Contacts database management")
    parser.add_argument("--seed", action="store_true", help="insert sample contacts")
    args = parser.parse_args(argv)

    print("Creating tables (if missing)...")
    create_tables()
    if args.seed:
        print("Seeding sample contacts...")
        print(f"Created {seed_contacts()} contacts.")
    print("All DB management tasks complete.")


if __name__ == "__main__":
    main()
