"""Importing this package registers every table on Base.metadata"""

from src.service.marketplace.driven_adapter.model.offer_model import OfferModel
from src.service.marketplace.driven_adapter.model.rating_model import RatingModel
from src.service.marketplace.driven_adapter.model.reservation_model import ReservationModel
from src.service.marketplace.driven_adapter.model.subscription_model import SubscriptionModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel


__all__ = ['OfferModel', 'RatingModel', 'ReservationModel', 'SubscriptionModel', 'UserModel']
