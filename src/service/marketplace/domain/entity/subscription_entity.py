from datetime import datetime, timezone
from typing import Iterable, List, Optional

import attrs

from src.platform.exception.exceptions import InputValidationError
from src.service.marketplace.domain.enum.offer_category import OfferCategory


@attrs.define
class Subscription:
    """A subscriber's feed preferences: one town, one or more categories."""

    user_id: int
    town: str
    categories: List[OfferCategory] = attrs.field(factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, user_id: int, town: str, categories: Iterable[str]) -> 'Subscription':
        town = (town or '').strip()
        categories = list(categories or [])
        errors: dict[str, str] = {}
        if not town:
            errors['town'] = 'is required'
        if not categories:
            errors['categories'] = 'select at least one category'
        elif invalid := [c for c in categories if c not in OfferCategory.__members__.values()]:
            errors['categories'] = f'unknown categories: {", ".join(map(str, invalid))}'
        if errors:
            raise InputValidationError(errors)

        # Keep the first occurrence order, drop duplicates
        unique = list(dict.fromkeys(OfferCategory(c) for c in categories))
        now = datetime.now(timezone.utc)
        return cls(user_id=user_id, town=town, categories=unique, created_at=now, updated_at=now)

    def matches(self, *, town: str, category: OfferCategory) -> bool:
        return town == self.town and category in self.categories
