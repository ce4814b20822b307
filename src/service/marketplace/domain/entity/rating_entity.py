from datetime import datetime, timezone
from typing import Any, Optional

import attrs
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import InputValidationError


MIN_SCORE = 1
MAX_SCORE = 5
MAX_COMMENT_LENGTH = 1000


def validate_rating_input(*, rating: Any, comment: Optional[str]) -> dict[str, str]:
    errors: dict[str, str] = {}
    # bool is an int subclass, but True is not a star count
    if isinstance(rating, bool) or not isinstance(rating, int):
        errors['rating'] = 'must be an integer'
    elif not MIN_SCORE <= rating <= MAX_SCORE:
        errors['rating'] = f'must be between {MIN_SCORE} and {MAX_SCORE}'
    if comment is not None and len(comment.strip()) > MAX_COMMENT_LENGTH:
        errors['comment'] = f'must be at most {MAX_COMMENT_LENGTH} characters'
    return errors


@attrs.define
class Rating:
    id: UUID
    reservation_id: UUID
    publisher_id: int
    subscriber_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        reservation_id: UUID,
        publisher_id: int,
        subscriber_id: int,
        rating: int,
        comment: Optional[str] = None,
    ) -> 'Rating':
        errors = validate_rating_input(rating=rating, comment=comment)
        if errors:
            raise InputValidationError(errors)
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid_utils.uuid7(),
            reservation_id=reservation_id,
            publisher_id=publisher_id,
            subscriber_id=subscriber_id,
            rating=rating,
            comment=(comment or '').strip() or None,
            created_at=now,
            updated_at=now,
        )
