from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, RecipientUnresolvableError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.notify_owner_use_case import NotifyOwnerUseCase
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.service.reservation_request_validator import (
    clean_reservation_request,
)


class CreateReservationUseCase:
    """
    Reserve an offer on behalf of an authenticated requester.

    Flow:
    1. Validate every field (all failures reported together)
    2. Resolve the offer (NotFoundError) and its owner's contact (RecipientUnresolvableError)
    3. Persist the pending reservation (PersistenceError leaves nothing behind)
    4. Notify the owner, best-effort; the outcome never changes the result
    """

    def __init__(
        self,
        *,
        offer_query_repo: IOfferQueryRepo,
        reservation_command_repo: IReservationCommandRepo,
        user_query_repo: IUserQueryRepo,
        notify_owner_use_case: NotifyOwnerUseCase,
    ) -> None:
        self.offer_query_repo = offer_query_repo
        self.reservation_command_repo = reservation_command_repo
        self.user_query_repo = user_query_repo
        self.notify_owner_use_case = notify_owner_use_case
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        offer_query_repo: IOfferQueryRepo = Depends(Provide[Container.offer_query_repo]),
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        notify_owner_use_case: NotifyOwnerUseCase = Depends(
            Provide[Container.notify_owner_use_case]
        ),
    ) -> Self:
        return cls(
            offer_query_repo=offer_query_repo,
            reservation_command_repo=reservation_command_repo,
            user_query_repo=user_query_repo,
            notify_owner_use_case=notify_owner_use_case,
        )

    @Logger.io
    async def create_reservation(
        self,
        *,
        requester_id: int,
        offer_id: Any,
        subscriber_name: Any,
        subscriber_email: Any,
        subscriber_phone: Any = None,
        message: Any = None,
    ) -> Reservation:
        request = clean_reservation_request(
            offer_id=offer_id,
            subscriber_name=subscriber_name,
            subscriber_email=subscriber_email,
            subscriber_phone=subscriber_phone,
            message=message,
        )

        with self.tracer.start_as_current_span(
            'use_case.create_reservation',
            attributes={'offer.id': str(request.offer_id), 'requester.id': requester_id},
        ) as span:
            offer = await self.offer_query_repo.get_by_id(offer_id=request.offer_id)
            if not offer:
                raise NotFoundError('Offer not found')

            owner_contact = await self.user_query_repo.get_owner_contact(offer.created_by)
            if owner_contact is None or not owner_contact.is_reachable:
                raise RecipientUnresolvableError(
                    f'No contact email for owner {offer.created_by} of offer {offer.id}'
                )

            reservation = await self.reservation_command_repo.insert(
                reservation=Reservation.create(
                    offer_id=offer.id,
                    subscriber_id=requester_id,
                    subscriber_name=request.subscriber_name,
                    subscriber_email=request.subscriber_email,
                    subscriber_phone=request.subscriber_phone,
                    message=request.message,
                )
            )
            span.set_attribute('reservation.id', str(reservation.id))
            Logger.base.info(
                f'📝 [RESERVATION] {reservation.id} created for offer {offer.id} '
                f'by user {requester_id}'
            )

            notified = await self.notify_owner_use_case.notify_owner(
                offer=offer, reservation=reservation, owner_contact=owner_contact
            )
            span.set_attribute('notification.sent', notified)

            return reservation
