"""
Owner notification email for a new reservation.

Every human-supplied value is HTML-escaped (& < > " ') before it is placed in the
markup; mailto:/tel: targets are percent-encoded first and then escaped as attributes.
"""

from decimal import Decimal
from html import escape
from urllib.parse import quote

import attrs

from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.value_object.owner_contact import OwnerContact


SUBJECT_PREFIX = '🛒 Nueva reserva: '
FOOTER = 'Este email fue enviado desde Publicitta'
_ROW_SEPARATOR = '\n    '


@attrs.frozen
class RenderedEmail:
    subject: str
    html: str


def _e(value: object) -> str:
    return escape(str(value), quote=True)


def _link_target(scheme: str, value: str) -> str:
    return _e(f'{scheme}:{quote(value, safe="")}')


def format_price(price: Decimal, currency_suffix: str) -> str:
    return f'{Decimal(price):.2f}{currency_suffix}'


def render_subject(offer: Offer) -> str:
    # Plain-text header, not markup
    return f'{SUBJECT_PREFIX}{offer.title}'


def render_reservation_email(
    *,
    offer: Offer,
    reservation: Reservation,
    owner: OwnerContact,
    currency_suffix: str = '€',
) -> RenderedEmail:
    rows = [
        f'<p><strong>Nombre:</strong> {_e(reservation.subscriber_name)}</p>',
        (
            f'<p><strong>Email:</strong> <a href="{_link_target("mailto", reservation.subscriber_email)}">'
            f'{_e(reservation.subscriber_email)}</a></p>'
        ),
    ]
    if reservation.subscriber_phone:
        rows.append(
            f'<p><strong>Teléfono:</strong> <a href="{_link_target("tel", reservation.subscriber_phone)}">'
            f'{_e(reservation.subscriber_phone)}</a></p>'
        )
    if reservation.message:
        rows.append(f'<p><strong>Mensaje:</strong> {_e(reservation.message)}</p>')

    html = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="color: #333;">¡Nueva Reserva!</h1>
  <p>Hola {_e(owner.name)},</p>
  <p>Has recibido una nueva reserva para tu oferta:</p>
  <div style="background: #f5f5f5; padding: 16px; border-radius: 8px; margin: 16px 0;">
    <h2 style="margin-top: 0;">{_e(offer.title)}</h2>
    <p><strong>Precio:</strong> {_e(format_price(offer.price, currency_suffix))}</p>
    <p><strong>Tienda:</strong> {_e(offer.store_name)}</p>
    <p><strong>Población:</strong> {_e(offer.town)}</p>
  </div>
  <h3>Datos del cliente:</h3>
  <div style="background: #e8f4fd; padding: 16px; border-radius: 8px;">
    {_ROW_SEPARATOR.join(rows)}
  </div>
  <p style="color: #666; font-size: 12px; margin-top: 24px;">{FOOTER}</p>
</body>
</html>"""

    return RenderedEmail(subject=render_subject(offer), html=html)
