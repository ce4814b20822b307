"""Mock email sender for local development and tests."""

from datetime import datetime, timezone
from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_email_sender import IEmailSender


class MockEmailSender(IEmailSender):
    """Keeps messages in memory instead of delivering them."""

    def __init__(self) -> None:
        self.sent_emails: List[dict] = []

    @Logger.io
    async def send(self, *, to: str, subject: str, html: str) -> None:
        self.sent_emails.append(
            {
                'to': to,
                'subject': subject,
                'html': html,
                'sent_at': datetime.now(timezone.utc),
            }
        )
        Logger.base.info(f'📧 [MOCK EMAIL] To: {to} | Subject: {subject}')

    def clear(self) -> None:
        self.sent_emails.clear()
