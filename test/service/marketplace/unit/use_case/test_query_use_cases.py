from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.service.marketplace.app.query.get_publisher_rating_use_case import (
    GetPublisherRatingUseCase,
)
from src.service.marketplace.app.query.list_offers_use_case import ListOffersUseCase
from src.service.marketplace.domain.entity.rating_entity import Rating
from src.service.marketplace.domain.entity.subscription_entity import Subscription
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from test.service.marketplace.unit.test_helpers import (
    PUBLISHER_ID,
    SUBSCRIBER_ID,
    RepositoryMocks,
    make_offer,
    make_reservation,
)


pytestmark = pytest.mark.unit


class TestGetPublisherRating:
    @pytest.mark.asyncio
    async def test_average_of_five_three_four(self):
        offer = make_offer()
        ratings = [
            Rating.create(
                reservation_id=make_reservation(offer=offer).id,
                publisher_id=PUBLISHER_ID,
                subscriber_id=SUBSCRIBER_ID,
                rating=score,
            )
            for score in (5, 3, 4)
        ]
        mocks = RepositoryMocks(ratings=ratings)

        score = await GetPublisherRatingUseCase(rating_repo=mocks.rating_repo).average_rating(
            publisher_id=PUBLISHER_ID
        )

        assert score.average == 4.0
        assert score.count == 3
        mocks.rating_repo.list_by_publisher.assert_awaited_once_with(publisher_id=PUBLISHER_ID)


class TestListFeed:
    @pytest.mark.asyncio
    async def test_no_subscription_means_empty_feed(self):
        offer_query_repo = AsyncMock()
        subscription_repo = AsyncMock()
        subscription_repo.get_by_user_id = AsyncMock(return_value=None)
        use_case = ListOffersUseCase(
            offer_query_repo=offer_query_repo, subscription_repo=subscription_repo
        )

        assert await use_case.list_feed(subscriber_id=SUBSCRIBER_ID) == []
        offer_query_repo.list_by_town_and_categories.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_feed_uses_subscription_town_and_categories(self):
        offers = [make_offer()]
        offer_query_repo = AsyncMock()
        offer_query_repo.list_by_town_and_categories = AsyncMock(return_value=offers)
        subscription_repo = AsyncMock()
        subscription_repo.get_by_user_id = AsyncMock(
            return_value=Subscription.create(
                user_id=SUBSCRIBER_ID, town='Alcoy', categories=['OUTLET_ZAPATOS']
            )
        )
        use_case = ListOffersUseCase(
            offer_query_repo=offer_query_repo, subscription_repo=subscription_repo
        )

        result = await use_case.list_feed(
            subscriber_id=SUBSCRIBER_ID, only_active=True, today=date(2026, 5, 1)
        )

        assert result == offers
        offer_query_repo.list_by_town_and_categories.assert_awaited_once_with(
            town='Alcoy',
            categories=[OfferCategory.OUTLET_ZAPATOS],
            active_on=date(2026, 5, 1),
        )
