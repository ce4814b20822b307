"""
Reservation request validation.

Pure function, no I/O: runs before anything is read or written and reports every
failing field at once, keyed by the names the web form sends.
"""

from typing import Any, Optional

import attrs
from email_validator import EmailNotValidError, validate_email
from uuid_utils import UUID

from src.platform.exception.exceptions import InputValidationError


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
MESSAGE_MAX_LENGTH = 1000


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except (TypeError, ValueError):
        return False
    return True


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value.strip() if isinstance(value, str) else str(value).strip()


def validate_reservation_request(
    *,
    offer_id: Any,
    subscriber_name: Any,
    subscriber_email: Any,
    subscriber_phone: Any = None,
    message: Any = None,
) -> dict[str, str]:
    errors: dict[str, str] = {}

    offer_id = _text(offer_id)
    if not offer_id:
        errors['offerId'] = 'is required'
    elif not _is_uuid(offer_id):
        errors['offerId'] = 'must be a valid identifier'

    name = _text(subscriber_name) or ''
    if len(name) < NAME_MIN_LENGTH:
        errors['subscriberName'] = f'must be at least {NAME_MIN_LENGTH} characters'
    elif len(name) > NAME_MAX_LENGTH:
        errors['subscriberName'] = f'must be at most {NAME_MAX_LENGTH} characters'

    email = _text(subscriber_email) or ''
    if not email:
        errors['subscriberEmail'] = 'is required'
    elif len(email) > EMAIL_MAX_LENGTH:
        errors['subscriberEmail'] = f'must be at most {EMAIL_MAX_LENGTH} characters'
    elif not _is_email(email):
        errors['subscriberEmail'] = 'must be a valid email address'

    phone = _text(subscriber_phone)
    if phone and len(phone) > PHONE_MAX_LENGTH:
        errors['subscriberPhone'] = f'must be at most {PHONE_MAX_LENGTH} characters'

    text = _text(message)
    if text and len(text) > MESSAGE_MAX_LENGTH:
        errors['message'] = f'must be at most {MESSAGE_MAX_LENGTH} characters'

    return errors


@attrs.frozen
class CleanReservationRequest:
    offer_id: UUID
    subscriber_name: str
    subscriber_email: str
    subscriber_phone: Optional[str] = None
    message: Optional[str] = None


def clean_reservation_request(
    *,
    offer_id: Any,
    subscriber_name: Any,
    subscriber_email: Any,
    subscriber_phone: Any = None,
    message: Any = None,
) -> CleanReservationRequest:
    """Validate, then return the trimmed values; raises InputValidationError with every failure."""
    errors = validate_reservation_request(
        offer_id=offer_id,
        subscriber_name=subscriber_name,
        subscriber_email=subscriber_email,
        subscriber_phone=subscriber_phone,
        message=message,
    )
    if errors:
        raise InputValidationError(errors)
    return CleanReservationRequest(
        offer_id=UUID(_text(offer_id)),
        subscriber_name=_text(subscriber_name) or '',
        subscriber_email=_text(subscriber_email) or '',
        subscriber_phone=_text(subscriber_phone) or None,
        message=_text(message) or None,
    )
