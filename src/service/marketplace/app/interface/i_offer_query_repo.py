from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from uuid_utils import UUID

from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.enum.offer_category import OfferCategory


class IOfferQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, offer_id: UUID) -> Optional[Offer]:
        pass

    @abstractmethod
    async def list_by_owner(self, *, owner_id: int) -> List[Offer]:
        """Newest first"""
        pass

    @abstractmethod
    async def list_by_town_and_categories(
        self,
        *,
        town: str,
        categories: List[OfferCategory],
        active_on: Optional[date] = None,
    ) -> List[Offer]:
        """Newest first; with active_on, skip offers that expired before that day"""
        pass
