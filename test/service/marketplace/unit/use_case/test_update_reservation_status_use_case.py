"""
Unit tests for UpdateReservationStatusUseCase

Only the offer owner may confirm or cancel; repeats are no-ops; terminal states stay put.
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
)
from src.service.marketplace.app.command.update_reservation_status_use_case import (
    UpdateReservationStatusUseCase,
)
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus
from test.service.marketplace.unit.test_helpers import (
    OTHER_USER_ID,
    PUBLISHER_ID,
    RepositoryMocks,
    make_offer,
    make_reservation,
)


pytestmark = pytest.mark.unit


def _build(mocks: RepositoryMocks) -> UpdateReservationStatusUseCase:
    return UpdateReservationStatusUseCase(
        reservation_command_repo=mocks.reservation_command_repo,
        offer_query_repo=mocks.offer_query_repo,
    )


class TestUpdateReservationStatus:
    @pytest.fixture
    def offer(self):
        return make_offer()

    @pytest.mark.asyncio
    async def test_owner_confirms_pending_reservation(self, offer):
        """
        Given: a pending reservation on the publisher's offer
        When: the publisher confirms it
        Then: status is confirmed and updated_at moved forward
        """
        pending = make_reservation(offer=offer)
        mocks = RepositoryMocks(offer=offer, reservation=pending)

        result = await _build(mocks).confirm(reservation_id=pending.id, publisher_id=PUBLISHER_ID)

        assert result.status == ReservationStatus.CONFIRMED
        assert result.updated_at > pending.updated_at
        call_kwargs = mocks.reservation_command_repo.update_status.call_args.kwargs
        assert call_kwargs['status'] == ReservationStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_owner_cancels_pending_reservation(self, offer):
        pending = make_reservation(offer=offer)
        mocks = RepositoryMocks(offer=offer, reservation=pending)

        result = await _build(mocks).cancel(reservation_id=pending.id, publisher_id=PUBLISHER_ID)

        assert result.status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_nothing_changes(self, offer):
        pending = make_reservation(offer=offer)
        mocks = RepositoryMocks(offer=offer, reservation=pending)

        with pytest.raises(ForbiddenError):
            await _build(mocks).confirm(reservation_id=pending.id, publisher_id=OTHER_USER_ID)

        mocks.reservation_command_repo.update_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_reservation_is_not_found(self, offer):
        mocks = RepositoryMocks(offer=offer, reservation=None)
        pending = make_reservation(offer=offer)

        with pytest.raises(NotFoundError):
            await _build(mocks).confirm(reservation_id=pending.id, publisher_id=PUBLISHER_ID)

    @pytest.mark.asyncio
    async def test_repeat_confirm_is_noop(self, offer):
        confirmed = make_reservation(offer=offer, status=ReservationStatus.CONFIRMED)
        mocks = RepositoryMocks(offer=offer, reservation=confirmed)

        result = await _build(mocks).confirm(
            reservation_id=confirmed.id, publisher_id=PUBLISHER_ID
        )

        assert result == confirmed
        mocks.reservation_command_repo.update_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancelled_cannot_be_confirmed(self, offer):
        cancelled = make_reservation(offer=offer, status=ReservationStatus.CANCELLED)
        mocks = RepositoryMocks(offer=offer, reservation=cancelled)
        mocks.reservation_command_repo.update_status = AsyncMock()

        with pytest.raises(InvalidTransitionError):
            await _build(mocks).confirm(reservation_id=cancelled.id, publisher_id=PUBLISHER_ID)

        mocks.reservation_command_repo.update_status.assert_not_awaited()
