"""
Resend transactional email adapter.

https://resend.com/docs/api-reference/emails/send-email
"""

import httpx

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import NotificationError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_email_sender import IEmailSender


class ResendEmailSender(IEmailSender):
    def __init__(
        self,
        *,
        api_key: str | None = None,
        api_url: str | None = None,
        from_address: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if api_key is None:
            api_key = settings.RESEND_API_KEY.get_secret_value()
        self.api_key = api_key
        self.api_url = api_url or settings.RESEND_API_URL
        self.from_address = from_address or settings.EMAIL_FROM_ADDRESS
        self.timeout = timeout or settings.EMAIL_TIMEOUT_SECONDS
        self._transport = transport

    @Logger.io
    async def send(self, *, to: str, subject: str, html: str) -> None:
        if not self.api_key:
            raise NotificationError('RESEND_API_KEY is not configured')

        payload = {
            'from': self.from_address,
            'to': [to],
            'subject': subject,
            'html': html,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={'Authorization': f'Bearer {self.api_key}'},
                )
        except httpx.HTTPError as e:
            raise NotificationError(f'Email provider unreachable: {e}') from e

        if response.is_error:
            raise NotificationError(
                f'Email provider rejected message ({response.status_code}): {response.text}'
            )
        Logger.base.info(f'📧 [RESEND] Sent "{subject}" to {to} ({response.status_code})')
