from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.app.interface.i_subscription_repo import ISubscriptionRepo
from src.service.marketplace.domain.entity.offer_entity import Offer


class ListOffersUseCase:
    def __init__(
        self, *, offer_query_repo: IOfferQueryRepo, subscription_repo: ISubscriptionRepo
    ) -> None:
        self.offer_query_repo = offer_query_repo
        self.subscription_repo = subscription_repo

    @classmethod
    @inject
    def depends(
        cls,
        offer_query_repo: IOfferQueryRepo = Depends(Provide[Container.offer_listing_repo]),
        subscription_repo: ISubscriptionRepo = Depends(Provide[Container.subscription_repo]),
    ) -> Self:
        return cls(offer_query_repo=offer_query_repo, subscription_repo=subscription_repo)

    @Logger.io
    async def get_by_id(self, *, offer_id: UUID) -> Offer:
        offer = await self.offer_query_repo.get_by_id(offer_id=offer_id)
        if not offer:
            raise NotFoundError('Offer not found')
        return offer

    @Logger.io
    async def list_mine(self, *, owner_id: int) -> List[Offer]:
        offers = await self.offer_query_repo.list_by_owner(owner_id=owner_id)
        Logger.base.info(f'📋 [LIST_MINE] Found {len(offers)} offers for publisher {owner_id}')
        return offers

    @Logger.io
    async def list_feed(
        self, *, subscriber_id: int, only_active: bool = False, today: Optional[date] = None
    ) -> List[Offer]:
        """Offers matching the subscriber's town and categories, newest first."""
        subscription = await self.subscription_repo.get_by_user_id(user_id=subscriber_id)
        if not subscription:
            Logger.base.info(f'🔕 [FEED] User {subscriber_id} has no subscription yet')
            return []

        offers = await self.offer_query_repo.list_by_town_and_categories(
            town=subscription.town,
            categories=subscription.categories,
            active_on=(today or date.today()) if only_active else None,
        )
        Logger.base.info(f'🌟 [FEED] {len(offers)} offers for user {subscriber_id}')
        return offers
