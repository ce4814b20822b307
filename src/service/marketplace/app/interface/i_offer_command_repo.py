from abc import ABC, abstractmethod

from uuid_utils import UUID

from src.service.marketplace.domain.entity.offer_entity import Offer


class IOfferCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, offer: Offer) -> Offer:
        pass

    @abstractmethod
    async def update(self, *, offer: Offer) -> Offer:
        pass

    @abstractmethod
    async def delete(self, *, offer_id: UUID) -> None:
        """Delete the offer together with its reservations and their ratings"""
        pass
