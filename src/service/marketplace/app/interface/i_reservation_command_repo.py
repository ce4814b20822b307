from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from uuid_utils import UUID

from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, reservation_id: UUID) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def insert(self, *, reservation: Reservation) -> Reservation:
        """Write the full row or nothing; raises PersistenceError on store failure"""
        pass

    @abstractmethod
    async def update_status(
        self, *, reservation_id: UUID, status: ReservationStatus, updated_at: datetime
    ) -> Reservation:
        pass
