from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from src.service.marketplace.driven_adapter.model.column_types import from_db_uuid, to_db_uuid
from src.service.marketplace.driven_adapter.model.offer_model import OfferModel


def offer_to_entity(db_offer: OfferModel) -> Offer:
    return Offer(
        id=from_db_uuid(db_offer.id),
        title=db_offer.title,
        description=db_offer.description,
        category=OfferCategory(db_offer.category),
        town=db_offer.town,
        price=db_offer.price,
        store_name=db_offer.store_name,
        contact=db_offer.contact,
        image_url=db_offer.image_url,
        size=db_offer.size,
        created_by=db_offer.created_by,
        expires_at=db_offer.expires_at,
        created_at=db_offer.created_at,
    )


def offer_to_model(offer: Offer) -> OfferModel:
    return OfferModel(
        id=to_db_uuid(offer.id),
        title=offer.title,
        description=offer.description,
        category=offer.category,
        town=offer.town,
        price=offer.price,
        store_name=offer.store_name,
        contact=offer.contact,
        image_url=offer.image_url,
        size=offer.size,
        created_by=offer.created_by,
        expires_at=offer.expires_at,
        created_at=offer.created_at,
    )
