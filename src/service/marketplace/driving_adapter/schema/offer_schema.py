from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from src.platform.types import UtilsUUID7
from src.service.marketplace.domain.entity.offer_entity import Offer


class OfferCreateRequest(BaseModel):
    title: str
    category: str
    town: str
    price: Decimal
    store_name: str
    contact: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    size: Optional[str] = None
    expires_at: Optional[date] = None

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Zapatillas',
                'category': 'OUTLET_ZAPATOS',
                'town': 'Alcoy',
                'price': 19.99,
                'store_name': 'Zapatería Lola',
                'contact': '600123456',
                'description': 'Últimas tallas de temporada',
                'size': '42',
                'expires_at': '2026-12-31',
            }
        }


class OfferUpdateRequest(BaseModel):
    """Partial update; only the fields sent are changed."""

    title: Optional[str] = None
    category: Optional[str] = None
    town: Optional[str] = None
    price: Optional[Decimal] = None
    store_name: Optional[str] = None
    contact: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    size: Optional[str] = None
    expires_at: Optional[date] = None


class OfferResponse(BaseModel):
    id: UtilsUUID7
    title: str
    category: str
    category_label: str
    town: str
    price: float
    store_name: str
    contact: str
    created_by: int
    description: Optional[str] = None
    image_url: Optional[str] = None
    size: Optional[str] = None
    expires_at: Optional[date] = None
    created_at: Optional[datetime] = None
    is_active: bool

    @classmethod
    def from_entity(cls, offer: Offer) -> 'OfferResponse':
        return cls(
            id=offer.id,
            title=offer.title,
            category=offer.category.value,
            category_label=offer.category.label,
            town=offer.town,
            price=float(offer.price),
            store_name=offer.store_name,
            contact=offer.contact,
            created_by=offer.created_by,
            description=offer.description,
            image_url=offer.image_url,
            size=offer.size,
            expires_at=offer.expires_at,
            created_at=offer.created_at,
            is_active=offer.is_active(),
        )
