"""
INPUT SANITIZATION
==================
Allow-list HTML cleaning for contact fields before they are stored.
"""

# FLOW:
# - sanitize_contact_data() runs after validation and returns a cleaned copy.
# WHY:
# - Notes are rendered as HTML, every other field is rendered as text.
# HOW:
# - Names and email keep no markup at all.
# - Notes keep b/i/em/strong and a[href] only.
# - script/style/textarea/option are dropped together with their bodies,
#   at the token level so attribute values and nesting are respected.
# - Cleaning repeats until the output is stable.

from __future__ import annotations

from typing import Any, Mapping

from bleach import html5lib_shim
from bleach.sanitizer import Cleaner

from Security.input_validation import EMAIL_ADDRESS, FIRST_NAME, LAST_NAME, NOTES

PLAIN_TEXT_TAGS: frozenset[str] = frozenset()
PLAIN_TEXT_ATTRIBUTES: dict[str, list[str]] = {}

NOTES_TAGS = frozenset({"b", "i", "em", "strong", "a"})
NOTES_ATTRIBUTES = {"a": ["href"]}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "ftp", "mailto", "tel"})

NON_TEXT_TAGS = frozenset({"script", "style", "textarea", "option"})
MAX_CLEAN_PASSES = 4

_TAG_TOKENS = ("StartTag", "EndTag", "EmptyTag")


class ContactSanitizationError(ValueError):
    """Raised when sanitization is called on input that was never validated."""


class NonTextElementFilter(html5lib_shim.Filter):
    """Drops non-text elements and every token between their start and end tags."""

    def __iter__(self):
        depth = 0
        for token in super().__iter__():
            if token["type"] in _TAG_TOKENS and token.get("name") in NON_TEXT_TAGS:
                if token["type"] == "StartTag":
                    depth += 1
                elif token["type"] == "EndTag":
                    depth = max(depth - 1, 0)
                continue
            if depth == 0:
                yield token


def attribute_filter(attributes: Mapping[str, list[str]]):
    def _allow(tag, name, value):
        # A value holding '"' is single-quoted on output, and bleach then
        # re-escapes its entities on every pass.
        return name in attributes.get(tag, ()) and '"' not in value
    return _allow


def _clean_once(value: str, tags, attributes) -> str:
    cleaner = Cleaner(
        tags=frozenset(tags) | NON_TEXT_TAGS,
        attributes=attribute_filter(attributes),
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[NonTextElementFilter],
    )
    return cleaner.clean(value).strip()


def clean_html(value: str, tags=PLAIN_TEXT_TAGS, attributes=PLAIN_TEXT_ATTRIBUTES) -> str:
    cleaned = value.strip()
    for _ in range(MAX_CLEAN_PASSES):
        result = _clean_once(cleaned, tags, attributes)
        if result == cleaned:
            break
        cleaned = result
    return cleaned


def _required_text(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str):
        raise ContactSanitizationError(f"{field} must be a validated string, got {type(value).__name__}")
    return value


def _optional_text(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ContactSanitizationError(f"{field} must be a string, got {type(value).__name__}")
    return value


def sanitize_contact_data(data: Mapping[str, Any]) -> dict[str, str]:
    return {
        FIRST_NAME: clean_html(_required_text(data, FIRST_NAME)),
        LAST_NAME: clean_html(_required_text(data, LAST_NAME)),
        EMAIL_ADDRESS: clean_html(_optional_text(data, EMAIL_ADDRESS)),
        NOTES: clean_html(_optional_text(data, NOTES), tags=NOTES_TAGS, attributes=NOTES_ATTRIBUTES),
    }
