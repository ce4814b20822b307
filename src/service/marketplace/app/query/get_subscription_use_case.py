from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_subscription_repo import ISubscriptionRepo
from src.service.marketplace.domain.entity.subscription_entity import Subscription


class GetSubscriptionUseCase:
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
    async def get(self, *, user_id: int) -> Optional[Subscription]:
        return await self.subscription_repo.get_by_user_id(user_id=user_id)
