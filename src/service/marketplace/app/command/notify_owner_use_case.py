from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import mark_failed
from src.service.marketplace.app.interface.i_email_sender import IEmailSender
from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.service.reservation_email_renderer import (
    render_reservation_email,
)
from src.service.marketplace.domain.value_object.owner_contact import OwnerContact


class NotifyOwnerUseCase:
    """
    Email the offer owner about a new reservation.

    Best-effort and isolated from the reservation itself: a single send attempt,
    any failure is logged with the reservation id and reported as False, never raised.
    """

    def __init__(self, *, email_sender: IEmailSender, currency_suffix: str = '€') -> None:
        self.email_sender = email_sender
        self.currency_suffix = currency_suffix
        self.tracer = trace.get_tracer(__name__)

    async def notify_owner(
        self, *, offer: Offer, reservation: Reservation, owner_contact: OwnerContact
    ) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.notify_owner',
            attributes={'reservation.id': str(reservation.id), 'offer.id': str(offer.id)},
        ) as span:
            try:
                email = render_reservation_email(
                    offer=offer,
                    reservation=reservation,
                    owner=owner_contact,
                    currency_suffix=self.currency_suffix,
                )
                await self.email_sender.send(
                    to=owner_contact.email, subject=email.subject, html=email.html
                )
            except Exception as e:
                mark_failed(span, e)
                span.set_attribute('notification.sent', False)
                Logger.base.warning(
                    f'📭 [NOTIFY] Email for reservation {reservation.id} failed: '
                    f'{type(e).__name__}: {e}'
                )
                return False

            span.set_attribute('notification.sent', True)
            Logger.base.info(
                f'📬 [NOTIFY] Owner {owner_contact.user_id} notified of reservation {reservation.id}'
            )
            return True
