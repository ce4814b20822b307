from datetime import datetime, timezone
from typing import Optional

import attrs
import uuid_utils
from uuid_utils import UUID

from src.platform.exception.exceptions import InvalidTransitionError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@attrs.define
class Reservation:
    id: UUID
    offer_id: UUID
    subscriber_id: int
    subscriber_name: str
    subscriber_email: str
    subscriber_phone: Optional[str] = None
    message: Optional[str] = None
    status: ReservationStatus = ReservationStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        offer_id: UUID,
        subscriber_id: int,
        subscriber_name: str,
        subscriber_email: str,
        subscriber_phone: Optional[str] = None,
        message: Optional[str] = None,
    ) -> 'Reservation':
        """Build a new pending reservation from an already validated request."""
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid_utils.uuid7(),
            offer_id=offer_id,
            subscriber_id=subscriber_id,
            subscriber_name=subscriber_name.strip(),
            subscriber_email=subscriber_email.strip(),
            subscriber_phone=_optional_text(subscriber_phone),
            message=_optional_text(message),
            status=ReservationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def transition_to(self, target: ReservationStatus) -> 'Reservation':
        """
        Move out of pending into confirmed or cancelled.

        Asking for the status the reservation already has returns it untouched.
        Anything else that does not start from pending is rejected.
        """
        if self.status == target:
            return self
        if self.status != ReservationStatus.PENDING or target == ReservationStatus.PENDING:
            raise InvalidTransitionError(
                f'Cannot change reservation from {self.status.value} to {target.value}'
            )
        return attrs.evolve(self, status=target, updated_at=datetime.now(timezone.utc))

    def confirm(self) -> 'Reservation':
        return self.transition_to(ReservationStatus.CONFIRMED)

    def cancel(self) -> 'Reservation':
        return self.transition_to(ReservationStatus.CANCELLED)

    def belongs_to(self, subscriber_id: int) -> bool:
        return self.subscriber_id == subscriber_id

    @property
    def can_be_rated(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED
