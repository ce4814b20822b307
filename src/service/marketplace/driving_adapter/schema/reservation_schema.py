from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.platform.types import UtilsUUID7
from src.service.marketplace.domain.entity.reservation_entity import Reservation


class ReservationCreateRequest(BaseModel):
    """
    Reservation request as the web client sends it (camelCase).

    Fields are loosely typed on purpose so the domain validator can report
    every failing field at once instead of stopping at the first parse error.
    """

    offer_id: Any = Field(None, alias='offerId')
    subscriber_name: Any = Field(None, alias='subscriberName')
    subscriber_email: Any = Field(None, alias='subscriberEmail')
    subscriber_phone: Any = Field(None, alias='subscriberPhone')
    message: Any = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'offerId': '019a3fa5-6b1e-7cc2-a6f0-3c1d2b9e8f10',
                'subscriberName': 'Ana',
                'subscriberEmail': 'ana@example.com',
                'subscriberPhone': '+34 600 123 456',
                'message': '¿Me la guardas hasta el sábado?',
            }
        }


class ReservationCreatedResponse(BaseModel):
    success: bool = True
    reservation_id: UtilsUUID7 = Field(..., alias='reservationId')
    message: str = 'Reserva creada correctamente'

    class Config:
        populate_by_name = True


class ReservationResponse(BaseModel):
    id: UtilsUUID7
    offer_id: UtilsUUID7
    subscriber_id: int
    subscriber_name: str
    subscriber_email: str
    subscriber_phone: Optional[str] = None
    message: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, reservation: Reservation) -> 'ReservationResponse':
        return cls(
            id=reservation.id,
            offer_id=reservation.offer_id,
            subscriber_id=reservation.subscriber_id,
            subscriber_name=reservation.subscriber_name,
            subscriber_email=reservation.subscriber_email,
            subscriber_phone=reservation.subscriber_phone,
            message=reservation.message,
            status=reservation.status.value,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )


class ReservationOfferSummary(BaseModel):
    id: UtilsUUID7
    title: str
    price: float
    store_name: str
    town: str
    created_by: int


class ReservationRatingSummary(BaseModel):
    rating: int
    comment: Optional[str] = None


class ReservationDetailResponse(ReservationResponse):
    offer: ReservationOfferSummary
    rating: Optional[ReservationRatingSummary] = None
