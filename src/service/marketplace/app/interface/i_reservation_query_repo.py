from abc import ABC, abstractmethod
from typing import List


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def list_received_with_details(self, *, publisher_id: int) -> List[dict]:
        """Reservations on offers the publisher owns, newest first, with offer summary"""
        pass

    @abstractmethod
    async def list_mine_with_details(self, *, subscriber_id: int) -> List[dict]:
        """The subscriber's reservations, newest first, with offer summary and rating"""
        pass
