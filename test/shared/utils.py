from typing import Any, Dict
import uuid

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import OFFER_CREATE, USER_CREATE, USER_LOGIN


DEFAULT_PASSWORD = 'P@ssw0rd'


def unique_email(prefix: str) -> str:
    """The database lives for the whole session, so every test user gets its own email."""
    return f'{prefix}.{uuid.uuid4().hex[:10]}@example.com'


def unique_town(prefix: str = 'Alcoy') -> str:
    return f'{prefix}-{uuid.uuid4().hex[:8]}'


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_user(
    client: TestClient,
    *,
    email: str,
    name: str,
    town: str,
    role: str,
    password: str = DEFAULT_PASSWORD,
) -> Dict[str, Any]:
    response = client.post(
        USER_CREATE,
        json={'email': email, 'password': password, 'name': name, 'town': town, 'role': role},
    )
    assert_response_status(response, 201, f'Failed to create {role} user: {response.text}')
    return response.json()


def login_user(client: TestClient, *, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return response.json()['access_token']


def create_offer(
    client: TestClient, headers: Dict[str, str], **overrides: Any
) -> Dict[str, Any]:
    payload = {
        'title': 'Zapatillas',
        'category': 'OUTLET_ZAPATOS',
        'town': 'Alcoy',
        'price': 19.99,
        'store_name': 'Zapatería Lola',
        'contact': '600123456',
    } | overrides
    response = client.post(OFFER_CREATE, json=payload, headers=headers)
    assert_response_status(response, 201)
    return response.json()
