"""
Tests for contact field validation and error message rendering.
"""

from __future__ import annotations

import pytest

from Security.input_validation import (
    ERROR_PREAMBLE,
    ValidationFailure,
    validate_allowlist,
    validate_contact_data,
)


def _form(first="John", last="Doe", email="", notes=""):
    return {"firstName": first, "lastName": last, "emailAddress": email, "notes": notes}


def test_letters_only_names_without_email_are_valid() -> None:
    result = validate_contact_data(_form())
    assert result.is_valid
    assert result.failures == ()
    assert result.error_message == ERROR_PREAMBLE


def test_absent_email_is_not_checked() -> None:
    result = validate_contact_data({"firstName": "Ada", "lastName": "Lovelace"})
    assert result.is_valid


@pytest.mark.parametrize("name", ["John1", "Jo hn", "John!", "O'Brien", "Anne-Marie", " John", "John\n", "José"])
def test_first_name_with_non_letters_is_rejected(name: str) -> None:
    result = validate_contact_data(_form(first=name))
    assert not result.is_valid
    assert result.failures == (ValidationFailure.FIRST_NAME,)
    assert "First name should contain only letters." in result.error_message


@pytest.mark.parametrize("name", ["Doe2", "Van Dyke", "Smith.", "<b>Doe</b>"])
def test_last_name_with_non_letters_is_rejected(name: str) -> None:
    result = validate_contact_data(_form(last=name))
    assert not result.is_valid
    assert result.has_failure(ValidationFailure.LAST_NAME)
    assert "Last name should contain only letters." in result.error_message
    assert "First name" not in result.error_message


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_or_blank_names_are_rejected(value) -> None:
    result = validate_contact_data({"firstName": value, "lastName": value})
    assert result.failures == (ValidationFailure.FIRST_NAME, ValidationFailure.LAST_NAME)


def test_non_string_name_is_rejected() -> None:
    result = validate_contact_data({"firstName": 42, "lastName": "Doe"})
    assert result.failures == (ValidationFailure.FIRST_NAME,)


@pytest.mark.parametrize("email", ["john", "john@doe", "johndoe.com", "john doe@doe.com", "@doe.com", "john@.com"])
def test_malformed_email_is_rejected(email: str) -> None:
    result = validate_contact_data(_form(email=email))
    assert not result.is_valid
    assert result.failures == (ValidationFailure.EMAIL_ADDRESS,)
    assert "Please provide a valid email address." in result.error_message


@pytest.mark.parametrize("email", ["john@doe.com", "a@b.c", "first.last+tag@mail.example.org", "x@y..z"])
def test_coarse_email_shape_is_accepted(email: str) -> None:
    assert validate_contact_data(_form(email=email)).is_valid


def test_every_rule_is_reported_in_field_order() -> None:
    result = validate_contact_data(_form(first="J0hn", last="D0e", email="nope"))
    assert result.failures == (
        ValidationFailure.FIRST_NAME,
        ValidationFailure.LAST_NAME,
        ValidationFailure.EMAIL_ADDRESS,
    )
    assert result.error_message == (
        "Please correct the following issues:"
        " First name should contain only letters."
        " Last name should contain only letters."
        " Please provide a valid email address."
    )


def test_john1_scenario_message() -> None:
    result = validate_contact_data({"firstName": "John1", "lastName": "Doe", "emailAddress": "", "notes": ""})
    assert result.is_valid is False
    assert "First name should contain only letters." in result.error_message


def test_validation_is_repeatable() -> None:
    data = _form(first="John1", email="bad")
    assert validate_contact_data(data) == validate_contact_data(data)


def test_validate_allowlist() -> None:
    assert validate_allowlist("abc", r"[a-z]+") == "abc"
    assert validate_allowlist("abc1", r"[a-z]+") is None
    assert validate_allowlist(None, r"[a-z]+") is None
