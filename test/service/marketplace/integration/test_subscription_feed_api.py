from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import OFFER_FEED, SUBSCRIPTION_BASE
from test.shared.utils import assert_response_status, create_offer, unique_town


pytestmark = pytest.mark.integration


class TestSubscriptionAndFeed:
    def test_feed_is_empty_without_subscription(self, client: TestClient, subscriber):
        response = client.get(OFFER_FEED, headers=subscriber['headers'])

        assert_response_status(response, 200)
        assert response.json() == []
        assert client.get(SUBSCRIPTION_BASE, headers=subscriber['headers']).json() is None

    def test_feed_matches_town_and_categories(self, client: TestClient, publisher, subscriber):
        """
        Given: offers in two towns and two categories
        When: the subscriber follows one town and one category
        Then: only matching offers come back, newest first
        """
        town = unique_town()
        older = create_offer(client, publisher['headers'], town=town, title='Zapatos A')
        create_offer(client, publisher['headers'], town=town, title='Camisa', category='OUTLET_ROPA')
        create_offer(client, publisher['headers'], town=unique_town('Elche'), title='Zapatos B')
        newer = create_offer(client, publisher['headers'], town=town, title='Zapatos C')

        subscribed = client.put(
            SUBSCRIPTION_BASE,
            json={'town': town, 'categories': ['OUTLET_ZAPATOS']},
            headers=subscriber['headers'],
        )
        assert_response_status(subscribed, 200)

        feed = client.get(OFFER_FEED, headers=subscriber['headers']).json()
        assert [o['id'] for o in feed] == [newer['id'], older['id']]

    def test_only_active_hides_expired_offers(self, client: TestClient, publisher, subscriber):
        town = unique_town()
        active = create_offer(client, publisher['headers'], town=town, expires_at='2099-12-31')
        create_offer(client, publisher['headers'], town=town, expires_at='2000-01-01')
        client.put(
            SUBSCRIPTION_BASE,
            json={'town': town, 'categories': ['OUTLET_ZAPATOS']},
            headers=subscriber['headers'],
        )

        everything = client.get(OFFER_FEED, headers=subscriber['headers']).json()
        only_active = client.get(
            OFFER_FEED, params={'only_active': 'true'}, headers=subscriber['headers']
        ).json()

        assert len(everything) == 2
        assert [o['id'] for o in only_active] == [active['id']]

    def test_resubscribing_replaces_preferences(self, client: TestClient, subscriber):
        client.put(
            SUBSCRIPTION_BASE,
            json={'town': 'Alcoy', 'categories': ['OTROS']},
            headers=subscriber['headers'],
        )
        client.put(
            SUBSCRIPTION_BASE,
            json={'town': 'Elche', 'categories': ['OUTLET_ROPA', 'OUTLET_TECNO']},
            headers=subscriber['headers'],
        )

        current = client.get(SUBSCRIPTION_BASE, headers=subscriber['headers']).json()
        assert current['town'] == 'Elche'
        assert current['categories'] == ['OUTLET_ROPA', 'OUTLET_TECNO']

    def test_subscription_requires_categories(self, client: TestClient, subscriber):
        response = client.put(
            SUBSCRIPTION_BASE,
            json={'town': 'Alcoy', 'categories': []},
            headers=subscriber['headers'],
        )
        assert_response_status(response, 400)
        assert 'categories' in response.json()['errors']

    def test_publisher_has_no_feed(self, client: TestClient, publisher):
        assert_response_status(client.get(OFFER_FEED, headers=publisher['headers']), 403)
