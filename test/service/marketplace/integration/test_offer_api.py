from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    OFFER_CREATE,
    OFFER_DELETE,
    OFFER_GET,
    OFFER_MINE,
    OFFER_UPDATE,
    RESERVATION_CREATE,
)
from test.shared.utils import (
    assert_response_status,
    auth_headers,
    create_offer,
    create_user,
    login_user,
    unique_email,
)


pytestmark = pytest.mark.integration


class TestOfferApi:
    def test_publisher_creates_and_reads_offer(self, client: TestClient, publisher, subscriber):
        offer = create_offer(client, publisher['headers'], size='42', expires_at='2099-01-01')

        assert offer['title'] == 'Zapatillas'
        assert offer['price'] == 19.99
        assert offer['category_label'] == 'Zapatos'
        assert offer['created_by'] == publisher['id']
        assert offer['is_active'] is True

        fetched = client.get(OFFER_GET.format(offer_id=offer['id']), headers=subscriber['headers'])
        assert_response_status(fetched, 200)
        assert fetched.json()['size'] == '42'

    def test_subscriber_cannot_create_offer(self, client: TestClient, subscriber):
        response = client.post(
            OFFER_CREATE,
            json={
                'title': 'Bolso',
                'category': 'OTROS',
                'town': 'Alcoy',
                'price': 5,
                'store_name': 'Tienda',
                'contact': '600123456',
            },
            headers=subscriber['headers'],
        )
        assert_response_status(response, 403)

    def test_invalid_offer_fields(self, client: TestClient, publisher):
        response = client.post(
            OFFER_CREATE,
            json={
                'title': 'ab',
                'category': 'JOYAS',
                'town': 'Alcoy',
                'price': -1,
                'store_name': 'Tienda',
                'contact': '600123456',
            },
            headers=publisher['headers'],
        )

        assert_response_status(response, 400)
        assert set(response.json()['errors']) == {'title', 'category', 'price'}

    def test_list_mine_newest_first(self, client: TestClient, publisher):
        first = create_offer(client, publisher['headers'], title='Primera')
        second = create_offer(client, publisher['headers'], title='Segunda')

        mine = client.get(OFFER_MINE, headers=publisher['headers']).json()

        assert [o['id'] for o in mine] == [second['id'], first['id']]

    def test_owner_updates_and_other_publisher_is_forbidden(self, client: TestClient, publisher):
        offer = create_offer(client, publisher['headers'])
        email = unique_email('otra')
        create_user(client, email=email, name='Otra Tienda', town='Alcoy', role='publisher')
        other_headers = auth_headers(login_user(client, email=email))

        updated = client.patch(
            OFFER_UPDATE.format(offer_id=offer['id']),
            json={'price': 9.5, 'title': 'Zapatillas rebajadas'},
            headers=publisher['headers'],
        )
        forbidden = client.patch(
            OFFER_UPDATE.format(offer_id=offer['id']),
            json={'price': 1},
            headers=other_headers,
        )

        assert_response_status(updated, 200)
        assert updated.json()['price'] == 9.5
        assert updated.json()['title'] == 'Zapatillas rebajadas'
        assert_response_status(forbidden, 403)

    def test_delete_removes_offer_and_its_reservations(
        self, client: TestClient, publisher, subscriber
    ):
        offer = create_offer(client, publisher['headers'])
        reserved = client.post(
            RESERVATION_CREATE,
            json={
                'offerId': offer['id'],
                'subscriberName': 'Ana',
                'subscriberEmail': 'ana@example.com',
            },
            headers=subscriber['headers'],
        )
        assert_response_status(reserved, 200)

        deleted = client.delete(OFFER_DELETE.format(offer_id=offer['id']), headers=publisher['headers'])

        assert_response_status(deleted, 204)
        missing = client.get(OFFER_GET.format(offer_id=offer['id']), headers=publisher['headers'])
        assert_response_status(missing, 404)
