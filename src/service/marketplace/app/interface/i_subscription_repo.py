from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.subscription_entity import Subscription


class ISubscriptionRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[Subscription]:
        pass

    @abstractmethod
    async def upsert(self, *, subscription: Subscription) -> Subscription:
        """One row per subscriber, keyed by user_id"""
        pass
