"""
Unit tests for Logger.io

Wrapped callables keep their behavior; secrets never reach the log sink.
"""

from collections.abc import Generator

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger, LoguruIO
from src.platform.logging.loguru_io_config import MASK, access_log_level, custom_logger
from src.platform.logging.loguru_io_utils import mask_sensitive, truncate_content


pytestmark = pytest.mark.unit


@pytest.fixture
def captured_logs() -> Generator[list[str], None, None]:
    messages: list[str] = []
    sink_id = custom_logger.add(lambda message: messages.append(str(message)), level='DEBUG')
    yield messages
    custom_logger.remove(sink_id)


class TestMasking:
    def test_sensitive_keys_in_repr_are_masked(self):
        masked = mask_sensitive("LoginRequest(email='a@b.com', password='hunter2')")

        assert 'hunter2' not in masked
        assert f"password='{MASK}'" in masked
        assert "email='a@b.com'" in masked

    def test_plain_values_pass_through(self):
        assert mask_sensitive(42) == 42
        assert mask_sensitive(None) is None
        assert mask_sensitive('Zapatillas') == 'Zapatillas'

    def test_dict_keys_are_masked_recursively(self):
        io = LoguruIO(custom_logger, truncate_content=False)

        masked = io.mask_sensitive({'api_key': 're_123', 'nested': [{'token': 'abc'}], 'n': 1})

        assert masked == {'api_key': MASK, 'nested': [{'token': MASK}], 'n': 1}

    def test_truncate_long_content(self):
        assert truncate_content('x' * 10, max_length=20) == 'x' * 10
        assert truncate_content('x' * 30, max_length=20).startswith('x' * 20 + '... (truncated 10')


class TestLoggerIo:
    @pytest.mark.asyncio
    async def test_async_function_result_is_returned_and_password_masked(self, captured_logs):
        @Logger.io
        async def login(*, email: str, password: str) -> str:
            return f'token-for-{email}'

        assert await login(email='a@b.com', password='hunter2') == 'token-for-a@b.com'
        assert not any('hunter2' in line for line in captured_logs)

    def test_sync_function_reraises_domain_errors(self):
        @Logger.io
        def find() -> None:
            raise NotFoundError('Offer not found')

        with pytest.raises(NotFoundError):
            find()

    def test_reraise_false_swallows_and_returns_none(self):
        @Logger.io(reraise=False)
        def explode() -> int:
            raise RuntimeError('boom')

        assert explode() is None

    def test_unknown_keyword_arguments_are_dropped(self):
        @Logger.io
        def greet(*, name: str) -> str:
            return f'hola {name}'

        assert greet(name='Ana', request_id='ignored') == 'hola Ana'

    @pytest.mark.asyncio
    async def test_domain_error_is_logged_once_across_nested_calls(self, captured_logs):
        @Logger.io
        async def inner() -> None:
            raise NotFoundError('Offer not found')

        @Logger.io
        async def outer() -> None:
            await inner()

        with pytest.raises(NotFoundError):
            await outer()

        assert sum('NotFoundError: Offer not found' in line for line in captured_logs) == 1


class TestAccessLogLevel:
    @pytest.mark.parametrize(
        'status_code, level',
        [(200, 'SUCCESS'), (204, 'SUCCESS'), (307, 'WARNING'), (404, 'ERROR'), (503, 'CRITICAL')],
    )
    def test_status_class_maps_to_level(self, status_code, level):
        line = f'127.0.0.1:53412 - "POST /api/reservation HTTP/1.1" {status_code}'
        assert access_log_level(line) == level

    def test_other_messages_keep_their_level(self):
        assert access_log_level('Application startup complete.') is None
