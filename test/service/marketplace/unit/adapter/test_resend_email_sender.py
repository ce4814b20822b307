import json

import httpx
import pytest

from src.platform.exception.exceptions import NotificationError
from src.service.marketplace.driven_adapter.email.mock_email_sender import MockEmailSender
from src.service.marketplace.driven_adapter.email.resend_email_sender import ResendEmailSender


pytestmark = pytest.mark.unit

API_URL = 'https://api.resend.test/emails'


def _sender(handler, *, api_key: str = 're_test_key') -> ResendEmailSender:
    return ResendEmailSender(
        api_key=api_key,
        api_url=API_URL,
        from_address='Publicitta <noreply@resend.dev>',
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestResendEmailSender:
    @pytest.mark.asyncio
    async def test_posts_message_with_bearer_key(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={'id': 'email_123'})

        await _sender(handler).send(to='lola@example.com', subject='Hola', html='<p>x</p>')

        assert len(captured) == 1
        request = captured[0]
        assert str(request.url) == API_URL
        assert request.headers['Authorization'] == 'Bearer re_test_key'
        assert json.loads(request.content) == {
            'from': 'Publicitta <noreply@resend.dev>',
            'to': ['lola@example.com'],
            'subject': 'Hola',
            'html': '<p>x</p>',
        }

    @pytest.mark.asyncio
    async def test_provider_rejection_raises_notification_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={'message': 'invalid from'})

        with pytest.raises(NotificationError):
            await _sender(handler).send(to='lola@example.com', subject='Hola', html='x')

    @pytest.mark.asyncio
    async def test_transport_error_raises_notification_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('unreachable', request=request)

        with pytest.raises(NotificationError):
            await _sender(handler).send(to='lola@example.com', subject='Hola', html='x')

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_before_any_request(self):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        with pytest.raises(NotificationError):
            await _sender(handler, api_key='').send(to='a@b.com', subject='s', html='h')
        assert calls == []


class TestMockEmailSender:
    @pytest.mark.asyncio
    async def test_records_messages(self):
        sender = MockEmailSender()

        await sender.send(to='lola@example.com', subject='Hola', html='<p>x</p>')

        assert [e['to'] for e in sender.sent_emails] == ['lola@example.com']
        sender.clear()
        assert sender.sent_emails == []
