from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import USER_CREATE, USER_LOGIN, USER_ME
from test.shared.utils import (
    DEFAULT_PASSWORD,
    assert_response_status,
    create_user,
    unique_email,
)


pytestmark = pytest.mark.integration


class TestUserApi:
    def test_register_login_and_me(self, client: TestClient):
        email = unique_email('Mixed.Case')
        created = create_user(client, email=email, name='Ana', town='Alcoy', role='subscriber')
        assert created['email'] == email.lower()
        assert created['role'] == 'subscriber'

        login = client.post(USER_LOGIN, json={'email': email.lower(), 'password': DEFAULT_PASSWORD})
        assert_response_status(login, 200)
        body = login.json()
        assert body['token_type'] == 'bearer'

        me = client.get(USER_ME, headers={'Authorization': f'Bearer {body["access_token"]}'})
        assert_response_status(me, 200)
        assert me.json()['id'] == created['id']
        assert me.json()['town'] == 'Alcoy'

    def test_duplicate_email_conflicts(self, client: TestClient):
        email = unique_email('dup')
        create_user(client, email=email, name='Ana', town='Alcoy', role='subscriber')

        response = client.post(
            USER_CREATE,
            json={
                'email': email,
                'password': DEFAULT_PASSWORD,
                'name': 'Ana',
                'town': 'Alcoy',
                'role': 'subscriber',
            },
        )
        assert_response_status(response, 409)

    def test_wrong_password(self, client: TestClient):
        email = unique_email('wrong')
        create_user(client, email=email, name='Ana', town='Alcoy', role='subscriber')

        response = client.post(USER_LOGIN, json={'email': email, 'password': 'nope-nope'})

        assert_response_status(response, 400)
        assert response.json()['detail'] == 'LOGIN_BAD_CREDENTIALS'

    def test_short_password_and_name_are_rejected(self, client: TestClient):
        response = client.post(
            USER_CREATE,
            json={
                'email': unique_email('short'),
                'password': '123',
                'name': 'A',
                'town': 'Alcoy',
                'role': 'subscriber',
            },
        )
        assert_response_status(response, 400)

    def test_me_requires_token(self, client: TestClient):
        assert_response_status(client.get(USER_ME), 401)
