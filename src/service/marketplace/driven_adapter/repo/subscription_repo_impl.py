from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_subscription_repo import ISubscriptionRepo
from src.service.marketplace.domain.entity.subscription_entity import Subscription
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from src.service.marketplace.driven_adapter.model.subscription_model import SubscriptionModel


class SubscriptionRepoImpl(ISubscriptionRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_subscription: SubscriptionModel) -> Subscription:
        return Subscription(
            user_id=db_subscription.user_id,
            town=db_subscription.town,
            categories=[OfferCategory(c) for c in db_subscription.categories],
            created_at=db_subscription.created_at,
            updated_at=db_subscription.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Subscription]:
        async with self.session_factory() as session:
            db_subscription = await session.get(SubscriptionModel, user_id)
            return self._to_entity(db_subscription) if db_subscription else None

    @Logger.io
    async def upsert(self, *, subscription: Subscription) -> Subscription:
        categories = [category.value for category in subscription.categories]
        async with self.session_factory() as session:
            db_subscription = await session.get(SubscriptionModel, subscription.user_id)
            if db_subscription is None:
                db_subscription = SubscriptionModel(
                    user_id=subscription.user_id,
                    town=subscription.town,
                    categories=categories,
                    created_at=subscription.created_at,
                    updated_at=subscription.updated_at,
                )
                session.add(db_subscription)
            else:
                db_subscription.town = subscription.town
                db_subscription.categories = categories
                db_subscription.updated_at = subscription.updated_at
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(
                    f'Failed to save subscription for user {subscription.user_id}: {e}'
                ) from e
            await session.refresh(db_subscription)
            return self._to_entity(db_subscription)
