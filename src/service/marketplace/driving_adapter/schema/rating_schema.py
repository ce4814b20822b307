from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from src.platform.types import UtilsUUID7
from src.service.marketplace.domain.entity.rating_entity import Rating


class RatingRequest(BaseModel):
    # Range and type are checked by the rating ledger so errors share one format
    rating: Any = None
    comment: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'rating': 5, 'comment': 'Genial'}}


class RatingResponse(BaseModel):
    id: UtilsUUID7
    reservation_id: UtilsUUID7
    publisher_id: int
    subscriber_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, rating: Rating) -> 'RatingResponse':
        return cls(
            id=rating.id,
            reservation_id=rating.reservation_id,
            publisher_id=rating.publisher_id,
            subscriber_id=rating.subscriber_id,
            rating=rating.rating,
            comment=rating.comment,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class PublisherRatingResponse(BaseModel):
    publisher_id: int
    average: Optional[float] = None
    count: int
