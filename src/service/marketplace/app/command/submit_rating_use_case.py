from typing import Any, Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import InputValidationError, NotEligibleError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.app.interface.i_rating_repo import IRatingRepo
from src.service.marketplace.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.marketplace.domain.entity.rating_entity import Rating, validate_rating_input


class SubmitRatingUseCase:
    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        offer_query_repo: IOfferQueryRepo,
        rating_repo: IRatingRepo,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.offer_query_repo = offer_query_repo
        self.rating_repo = rating_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        offer_query_repo: IOfferQueryRepo = Depends(Provide[Container.offer_query_repo]),
        rating_repo: IRatingRepo = Depends(Provide[Container.rating_repo]),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            offer_query_repo=offer_query_repo,
            rating_repo=rating_repo,
        )

    @Logger.io
    async def submit_rating(
        self,
        *,
        reservation_id: UUID,
        subscriber_id: int,
        rating: Any,
        comment: Optional[str] = None,
    ) -> Rating:
        """
        Rate a confirmed reservation, or edit the rating already attached to it.

        Raises NotEligibleError when the reservation is missing, belongs to someone else,
        or is not confirmed.
        """
        errors = validate_rating_input(rating=rating, comment=comment)
        if errors:
            raise InputValidationError(errors)

        with self.tracer.start_as_current_span(
            'use_case.submit_rating',
            attributes={'reservation.id': str(reservation_id), 'subscriber.id': subscriber_id},
        ):
            reservation = await self.reservation_command_repo.get_by_id(
                reservation_id=reservation_id
            )
            if not reservation or not reservation.belongs_to(subscriber_id):
                raise NotEligibleError('You can only rate your own reservations')
            if not reservation.can_be_rated:
                raise NotEligibleError('Only confirmed reservations can be rated')

            offer = await self.offer_query_repo.get_by_id(offer_id=reservation.offer_id)
            if not offer:
                raise NotEligibleError('The offer for this reservation no longer exists')

            new_rating = Rating.create(
                reservation_id=reservation.id,
                publisher_id=offer.created_by,
                subscriber_id=subscriber_id,
                rating=rating,
                comment=comment,
            )
            existing = await self.rating_repo.get_by_reservation_id(reservation_id=reservation.id)
            if existing:
                new_rating = attrs.evolve(
                    new_rating, id=existing.id, created_at=existing.created_at
                )

            saved = await self.rating_repo.upsert(rating=new_rating)
            Logger.base.info(
                f'⭐ [RATING] Reservation {reservation.id} rated {saved.rating} '
                f'for publisher {saved.publisher_id}'
            )
            return saved
