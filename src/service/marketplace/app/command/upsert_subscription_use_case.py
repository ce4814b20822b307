from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_subscription_repo import ISubscriptionRepo
from src.service.marketplace.domain.entity.subscription_entity import Subscription


class UpsertSubscriptionUseCase:
    def __init__(self, subscription_repo: ISubscriptionRepo) -> None:
        self.subscription_repo = subscription_repo

    @classmethod
    @inject
    def depends(
        cls,
        subscription_repo: ISubscriptionRepo = Depends(Provide[Container.subscription_repo]),
    ) -> Self:
        return cls(subscription_repo=subscription_repo)

    @Logger.io
    async def upsert(self, *, user_id: int, town: str, categories: List[str]) -> Subscription:
        subscription = Subscription.create(user_id=user_id, town=town, categories=categories)
        saved = await self.subscription_repo.upsert(subscription=subscription)
        Logger.base.info(
            f'🔔 [SUBSCRIPTION] User {user_id} follows {saved.town}: '
            f'{", ".join(saved.categories)}'
        )
        return saved
