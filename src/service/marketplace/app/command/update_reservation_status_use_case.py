from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus


class UpdateReservationStatusUseCase:
    """
    Confirm or cancel a pending reservation on behalf of the offer owner.

    Asking again for the status a reservation already has is a no-op success.
    Moving between confirmed and cancelled raises InvalidTransitionError.
    """

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        offer_query_repo: IOfferQueryRepo,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.offer_query_repo = offer_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        offer_query_repo: IOfferQueryRepo = Depends(Provide[Container.offer_query_repo]),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            offer_query_repo=offer_query_repo,
        )

    async def confirm(self, *, reservation_id: UUID, publisher_id: int) -> Reservation:
        return await self.update_status(
            reservation_id=reservation_id,
            publisher_id=publisher_id,
            target=ReservationStatus.CONFIRMED,
        )

    async def cancel(self, *, reservation_id: UUID, publisher_id: int) -> Reservation:
        return await self.update_status(
            reservation_id=reservation_id,
            publisher_id=publisher_id,
            target=ReservationStatus.CANCELLED,
        )

    @Logger.io
    async def update_status(
        self, *, reservation_id: UUID, publisher_id: int, target: ReservationStatus
    ) -> Reservation:
        with self.tracer.start_as_current_span(
            'use_case.update_reservation_status',
            attributes={
                'reservation.id': str(reservation_id),
                'reservation.target_status': target.value,
                'publisher.id': publisher_id,
            },
        ):
            reservation = await self.reservation_command_repo.get_by_id(
                reservation_id=reservation_id
            )
            if not reservation:
                raise NotFoundError('Reservation not found')

            offer = await self.offer_query_repo.get_by_id(offer_id=reservation.offer_id)
            if not offer:
                raise NotFoundError('Offer not found')
            if not offer.is_owned_by(publisher_id):
                raise ForbiddenError('Only the offer owner can change this reservation')

            updated = reservation.transition_to(target)
            if updated is reservation:
                Logger.base.info(
                    f'↩️ [RESERVATION] {reservation_id} already {target.value}, nothing to do'
                )
                return reservation

            saved = await self.reservation_command_repo.update_status(
                reservation_id=reservation_id,
                status=updated.status,
                updated_at=updated.updated_at,
            )
            Logger.base.info(f'✅ [RESERVATION] {reservation_id} is now {saved.status.value}')
            return saved
