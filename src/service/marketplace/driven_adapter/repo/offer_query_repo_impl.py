from datetime import date
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.domain.entity.offer_entity import Offer
from src.service.marketplace.domain.enum.offer_category import OfferCategory
from src.service.marketplace.driven_adapter.model.column_types import to_db_uuid
from src.service.marketplace.driven_adapter.model.offer_model import OfferModel
from src.service.marketplace.driven_adapter.repo.offer_mapper import offer_to_entity


class OfferQueryRepoImpl(IOfferQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, offer_id: UUID) -> Optional[Offer]:
        async with self.session_factory() as session:
            db_offer = await session.get(OfferModel, to_db_uuid(offer_id))
            return offer_to_entity(db_offer) if db_offer else None

    @Logger.io
    async def list_by_owner(self, *, owner_id: int) -> List[Offer]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(OfferModel)
                .where(OfferModel.created_by == owner_id)
                .order_by(OfferModel.created_at.desc(), OfferModel.id.desc())
            )
            return [offer_to_entity(db_offer) for db_offer in result.scalars().all()]

    @Logger.io
    async def list_by_town_and_categories(
        self,
        *,
        town: str,
        categories: List[OfferCategory],
        active_on: Optional[date] = None,
    ) -> List[Offer]:
        if not categories:
            return []
        query = select(OfferModel).where(
            OfferModel.town == town,
            OfferModel.category.in_(categories),
        )
        if active_on is not None:
            query = query.where(
                or_(OfferModel.expires_at.is_(None), OfferModel.expires_at >= active_on)
            )
        query = query.order_by(OfferModel.created_at.desc(), OfferModel.id.desc())

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [offer_to_entity(db_offer) for db_offer in result.scalars().all()]
