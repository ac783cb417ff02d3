"""
Field checks for incoming user payloads.

Validation happens at the API boundary, before anything reaches the
store.  ``validate_user_payload`` returns the cleaned values together
with a mapping of JSON field name to message; an empty mapping means
the cleaned values can be parsed into a
:class:`~user_directory_api.app.schemas.user.UserCreate`.  Only
presence, type and email format are checked.  Text fields are stored
exactly as they were checked, i.e. with surrounding whitespace removed.
"""

from typing import Any, Dict, Tuple

from email_validator import EmailNotValidError, validate_email


TEXT_FIELDS = ("username", "email", "firstName", "lastName")


def _check_text(payload: Dict[str, Any], field: str, errors: Dict[str, str]) -> str:
    value = payload.get(field)
    if value is None:
        errors[field] = f"{field} is required"
        return ""
    if not isinstance(value, str):
        errors[field] = f"{field} must be a string"
        return ""
    if not value.strip():
        errors[field] = f"{field} must not be blank"
        return ""
    return value.strip()


def validate_user_payload(payload: Any) -> Tuple[Dict[str, Any], Dict[str, str]]:
    """Check a create/update payload.

    Returns ``(cleaned, errors)``.  ``cleaned`` holds the stripped text
    fields and, when given, ``active``; unknown keys such as ``id`` are
    dropped.  ``errors`` maps each offending field to a message.
    """
    if not isinstance(payload, dict):
        return {}, {"body": "Request body must be a JSON object"}

    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = {field: _check_text(payload, field, errors) for field in TEXT_FIELDS}

    if "email" not in errors:
        try:
            validate_email(cleaned["email"], check_deliverability=False)
        except EmailNotValidError:
            errors["email"] = "email must be a well-formed email address"

    if "active" in payload:
        if isinstance(payload["active"], bool):
            cleaned["active"] = payload["active"]
        else:
            errors["active"] = "active must be a boolean"

    return cleaned, errors
