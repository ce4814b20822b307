"""
Test Configuration and Fixtures

- Unit tests (test/**/unit/): use AsyncMock repositories, no app or database
- Integration tests (test/**/integration/): TestClient over test/test_main.py backed by a
  throwaway SQLite file and the in-memory email sender
"""

# =============================================================================
# Environment setup MUST happen before any application import, since
# settings and the log sink are created at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_dir = Path(__file__).parent

    db_path = test_dir / 'test_marketplace.sqlite3'
    if db_path.exists():
        db_path.unlink()
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['EMAIL_BACKEND'] = 'mock'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')

    test_log_dir = test_dir / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from test.shared.utils import auth_headers, create_user, login_user, unique_email  # noqa: E402


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def mock_email_sender() -> Any:
    from src.platform.config.di import container

    sender = container.email_sender()
    sender.clear()
    return sender


@pytest.fixture
def publisher(client: TestClient) -> dict[str, Any]:
    """A fresh publisher with its bearer headers"""
    email = unique_email('tienda')
    user = create_user(client, email=email, name='Zapatería Lola', town='Alcoy', role='publisher')
    token = login_user(client, email=email)
    return {**user, 'headers': auth_headers(token)}


@pytest.fixture
def subscriber(client: TestClient) -> dict[str, Any]:
    """A fresh subscriber with its bearer headers"""
    email = unique_email('ana')
    user = create_user(client, email=email, name='Ana', town='Alcoy', role='subscriber')
    token = login_user(client, email=email)
    return {**user, 'headers': auth_headers(token)}


@pytest.fixture
def another_subscriber(client: TestClient) -> dict[str, Any]:
    email = unique_email('luis')
    user = create_user(client, email=email, name='Luis', town='Alcoy', role='subscriber')
    token = login_user(client, email=email)
    return {**user, 'headers': auth_headers(token)}
