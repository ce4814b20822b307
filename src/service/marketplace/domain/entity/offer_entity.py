from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import attrs
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import InputValidationError
from src.service.marketplace.domain.enum.offer_category import OfferCategory


# Minimum lengths after trimming, keyed by field
_MIN_LENGTHS = {'title': 3, 'town': 2, 'store_name': 2, 'contact': 5}
_MAX_LENGTHS = {'title': 200, 'town': 100, 'store_name': 200, 'contact': 255, 'size': 50}
EDITABLE_FIELDS = (
    'title',
    'description',
    'category',
    'town',
    'price',
    'store_name',
    'contact',
    'image_url',
    'size',
    'expires_at',
)


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_offer_fields(fields: dict[str, Any]) -> dict[str, str]:
    """Check whichever offer fields are present, returning field -> reason."""
    errors: dict[str, str] = {}
    for name, minimum in _MIN_LENGTHS.items():
        if name in fields:
            value = (fields[name] or '').strip()
            if len(value) < minimum:
                errors[name] = f'must be at least {minimum} characters'
    for name, maximum in _MAX_LENGTHS.items():
        value = fields.get(name)
        if name not in errors and value is not None and len(value.strip()) > maximum:
            errors[name] = f'must be at most {maximum} characters'

    if 'price' in fields:
        try:
            price = Decimal(str(fields['price']))
            if not price.is_finite() or price < 0:
                errors['price'] = 'must be a number greater than or equal to 0'
        except (InvalidOperation, TypeError, ValueError):
            errors['price'] = 'must be a number greater than or equal to 0'

    if 'category' in fields and fields['category'] not in OfferCategory.__members__.values():
        errors['category'] = f'must be one of: {", ".join(OfferCategory)}'
    return errors


@attrs.define
class Offer:
    id: UUID
    title: str
    category: OfferCategory
    town: str
    price: Decimal
    store_name: str
    contact: str
    created_by: int = attrs.field(on_setattr=attrs.setters.frozen)
    description: Optional[str] = None
    image_url: Optional[str] = None
    size: Optional[str] = None
    expires_at: Optional[date] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        created_by: int,
        title: str,
        category: str,
        town: str,
        price: Decimal | float | str,
        store_name: str,
        contact: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        size: Optional[str] = None,
        expires_at: Optional[date] = None,
    ) -> 'Offer':
        errors = validate_offer_fields(
            {
                'title': title,
                'category': category,
                'town': town,
                'price': price,
                'store_name': store_name,
                'contact': contact,
                'size': size,
            }
        )
        if errors:
            raise InputValidationError(errors)

        return cls(
            id=uuid_utils.uuid7(),
            title=title.strip(),
            category=OfferCategory(category),
            town=town.strip(),
            price=Decimal(str(price)).quantize(Decimal('0.01')),
            store_name=store_name.strip(),
            contact=contact.strip(),
            created_by=created_by,
            description=_clean_optional(description),
            image_url=_clean_optional(image_url),
            size=_clean_optional(size),
            expires_at=expires_at,
            created_at=datetime.now(timezone.utc),
        )

    def apply_changes(self, changes: dict[str, Any]) -> 'Offer':
        """Return a copy with the given editable fields replaced; created_by never changes."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise InputValidationError({name: 'is not editable' for name in sorted(unknown)})
        errors = validate_offer_fields(changes)
        if errors:
            raise InputValidationError(errors)

        updates: dict[str, Any] = {}
        for name, value in changes.items():
            if name == 'category':
                value = OfferCategory(value)
            elif name == 'price':
                value = Decimal(str(value)).quantize(Decimal('0.01'))
            elif name in ('description', 'image_url', 'size'):
                value = _clean_optional(value)
            elif isinstance(value, str):
                value = value.strip()
            updates[name] = value
        return attrs.evolve(self, **updates)

    def is_owned_by(self, user_id: int) -> bool:
        return self.created_by == user_id

    def is_active(self, today: Optional[date] = None) -> bool:
        if self.expires_at is None:
            return True
        return self.expires_at >= (today or date.today())
