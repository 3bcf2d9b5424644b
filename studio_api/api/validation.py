# This file validates studio drafts before they reach the database.
# `validate_studio_draft` returns every violation at once so clients can fix a payload in one pass.
# The store calls `ensure_valid_draft`, which raises a 400-mapped API error when anything is wrong.

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email

from studio_api.api.error_handlers import APIError

if TYPE_CHECKING:
    from studio_api.api.schemas.studio_schemas import StudioDraft

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000
LOCATION_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class StudioValidationError(APIError):
    """Raised when a draft breaks one or more field constraints."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = list(violations)
        super().__init__(
            status_code=400,
            error_code="VALIDATION_ERROR",
            message="Studio payload failed validation.",
            details=[asdict(item) for item in self.violations],
        )


def is_valid_email(value: str) -> bool:
    """Syntax-only check; single-label domains such as `studio@mixroom` are accepted."""

    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def _check_required_text(
    violations: list[FieldViolation],
    *,
    field: str,
    value: str | None,
    max_length: int,
    required_message: str,
    length_message: str,
) -> None:
    if value is None or not value.strip():
        violations.append(FieldViolation(field, required_message))
    elif len(value) > max_length:
        violations.append(FieldViolation(field, length_message))


def validate_studio_draft(draft: StudioDraft) -> list[FieldViolation]:
    """Return all constraint violations for a draft; an empty list means valid."""

    violations: list[FieldViolation] = []

    _check_required_text(
        violations,
        field="name",
        value=draft.name,
        max_length=NAME_MAX_LENGTH,
        required_message="Studio name is required",
        length_message=f"Studio name must not exceed {NAME_MAX_LENGTH} characters",
    )
    _check_required_text(
        violations,
        field="description",
        value=draft.description,
        max_length=DESCRIPTION_MAX_LENGTH,
        required_message="Studio description is required",
        length_message=f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters",
    )
    _check_required_text(
        violations,
        field="location",
        value=draft.location,
        max_length=LOCATION_MAX_LENGTH,
        required_message="Studio location is required",
        length_message=f"Location must not exceed {LOCATION_MAX_LENGTH} characters",
    )

    if draft.price_per_hour is None:
        violations.append(FieldViolation("pricePerHour", "Studio price is required"))
    elif not draft.price_per_hour > 0:
        violations.append(FieldViolation("pricePerHour", "Price must be greater than 0"))

    # Empty strings count as "no email" rather than a malformed one.
    if draft.contact_email:
        if len(draft.contact_email) > EMAIL_MAX_LENGTH:
            violations.append(
                FieldViolation(
                    "contactEmail", f"Email must not exceed {EMAIL_MAX_LENGTH} characters"
                )
            )
        if not is_valid_email(draft.contact_email):
            violations.append(FieldViolation("contactEmail", "Invalid email format"))

    return violations


def ensure_valid_draft(draft: StudioDraft) -> None:
    violations = validate_studio_draft(draft)
    if violations:
        raise StudioValidationError(violations)
