from src.service.marketplace.domain.enum.offer_category import OfferCategory
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus


__all__ = ['OfferCategory', 'ReservationStatus']
