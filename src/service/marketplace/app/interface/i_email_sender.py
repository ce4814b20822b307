from abc import ABC, abstractmethod


class IEmailSender(ABC):
    """Outbound transactional email"""

    @abstractmethod
    async def send(self, *, to: str, subject: str, html: str) -> None:
        """Deliver one message; raises NotificationError on failure"""
        pass
