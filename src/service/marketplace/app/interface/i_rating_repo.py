from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.marketplace.domain.entity.rating_entity import Rating


class IRatingRepo(ABC):
    @abstractmethod
    async def get_by_reservation_id(self, *, reservation_id: UUID) -> Optional[Rating]:
        pass

    @abstractmethod
    async def upsert(self, *, rating: Rating) -> Rating:
        """Insert, or update score and comment of the rating already on that reservation"""
        pass

    @abstractmethod
    async def list_by_publisher(self, *, publisher_id: int) -> List[Rating]:
        pass
