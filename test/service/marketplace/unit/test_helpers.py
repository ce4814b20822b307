"""
Test helpers for unit tests

Provides reusable test doubles (stubs, mocks, fakes) and entity builders
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List
from unittest.mock import AsyncMock

import attrs
import uuid_utils

from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.entity.rating_entity import Rating
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus
from src.service.marketplace.domain.value_object.owner_contact import OwnerContact


PUBLISHER_ID = 1
SUBSCRIBER_ID = 2
OTHER_USER_ID = 3


def make_offer(**overrides) -> Offer:
    values = {
        'id': uuid_utils.uuid7(),
        'title': 'Zapatillas',
        'category': OfferCategory.OUTLET_ZAPATOS,
        'town': 'Alcoy',
        'price': Decimal('19.99'),
        'store_name': 'Zapatería Lola',
        'contact': '600123456',
        'created_by': PUBLISHER_ID,
        'created_at': datetime.now(timezone.utc),
    } | overrides
    return Offer(**values)


def make_reservation(
    *, offer: Offer, status: ReservationStatus = ReservationStatus.PENDING, **overrides
) -> Reservation:
    created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
    values = {
        'id': uuid_utils.uuid7(),
        'offer_id': offer.id,
        'subscriber_id': SUBSCRIBER_ID,
        'subscriber_name': 'Ana',
        'subscriber_email': 'ana@example.com',
        'status': status,
        'created_at': created_at,
        'updated_at': created_at,
    } | overrides
    return Reservation(**values)


def make_owner_contact(**overrides) -> OwnerContact:
    values = {'user_id': PUBLISHER_ID, 'name': 'Lola', 'email': 'lola@example.com'} | overrides
    return OwnerContact(**values)


class RepositoryMocks:
    """
    Mock repositories container for testing use cases

    This is NOT a UoW - just a container for organizing mocks.

    Example:
        ```python
        mocks = RepositoryMocks(offer=offer, owner_contact=contact)
        use_case = CreateReservationUseCase(
            offer_query_repo=mocks.offer_query_repo,
            reservation_command_repo=mocks.reservation_command_repo,
            user_query_repo=mocks.user_query_repo,
            notify_owner_use_case=notify,
        )
        ```
    """

    def __init__(
        self,
        *,
        offer: Offer | None = None,
        owner_contact: OwnerContact | None = None,
        reservation: Reservation | None = None,
        existing_rating: Rating | None = None,
        ratings: List[Rating] | None = None,
    ):
        self.offer = offer
        self.reservation = reservation

        self.offer_query_repo = AsyncMock()
        self.offer_query_repo.get_by_id = AsyncMock(return_value=offer)

        self.user_query_repo = AsyncMock()
        self.user_query_repo.get_owner_contact = AsyncMock(return_value=owner_contact)

        self.reservation_command_repo = AsyncMock()
        self.reservation_command_repo.get_by_id = AsyncMock(return_value=reservation)
        self.reservation_command_repo.insert = AsyncMock(side_effect=self._insert)
        self.reservation_command_repo.update_status = AsyncMock(side_effect=self._update_status)

        self.rating_repo = AsyncMock()
        self.rating_repo.get_by_reservation_id = AsyncMock(return_value=existing_rating)
        self.rating_repo.upsert = AsyncMock(side_effect=self._upsert)
        self.rating_repo.list_by_publisher = AsyncMock(return_value=ratings or [])

        self.email_sender = AsyncMock()

    async def _insert(self, *, reservation: Reservation) -> Reservation:
        """Mock: Return reservation as-is (simulates successful persistence)"""
        return reservation

    async def _update_status(self, *, reservation_id, status, updated_at) -> Reservation:
        assert self.reservation is not None
        return attrs.evolve(self.reservation, status=status, updated_at=updated_at)

    async def _upsert(self, *, rating: Rating) -> Rating:
        return rating
