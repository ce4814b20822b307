from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_rating_repo import IRatingRepo
from src.service.marketplace.domain.entity.rating_entity import Rating
from src.service.marketplace.driven_adapter.model.column_types import from_db_uuid, to_db_uuid
from src.service.marketplace.driven_adapter.model.rating_model import RatingModel


class RatingRepoImpl(IRatingRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_rating: RatingModel) -> Rating:
        return Rating(
            id=from_db_uuid(db_rating.id),
            reservation_id=from_db_uuid(db_rating.reservation_id),
            publisher_id=db_rating.publisher_id,
            subscriber_id=db_rating.subscriber_id,
            rating=db_rating.rating,
            comment=db_rating.comment,
            created_at=db_rating.created_at,
            updated_at=db_rating.updated_at,
        )

    @Logger.io
    async def get_by_reservation_id(self, *, reservation_id: UUID) -> Optional[Rating]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(RatingModel).where(
                    RatingModel.reservation_id == to_db_uuid(reservation_id)
                )
            )
            db_rating = result.scalar_one_or_none()
            return self._to_entity(db_rating) if db_rating else None

    @Logger.io
    async def upsert(self, *, rating: Rating) -> Rating:
        async with self.session_factory() as session:
            result = await session.execute(
                select(RatingModel).where(
                    RatingModel.reservation_id == to_db_uuid(rating.reservation_id)
                )
            )
            db_rating = result.scalar_one_or_none()
            if db_rating is None:
                db_rating = RatingModel(
                    id=to_db_uuid(rating.id),
                    reservation_id=to_db_uuid(rating.reservation_id),
                    publisher_id=rating.publisher_id,
                    subscriber_id=rating.subscriber_id,
                    rating=rating.rating,
                    comment=rating.comment,
                    created_at=rating.created_at,
                    updated_at=rating.updated_at,
                )
                session.add(db_rating)
            else:
                db_rating.rating = rating.rating
                db_rating.comment = rating.comment
                db_rating.updated_at = rating.updated_at
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(
                    f'Failed to save rating for reservation {rating.reservation_id}: {e}'
                ) from e
            await session.refresh(db_rating)
            return self._to_entity(db_rating)

    @Logger.io
    async def list_by_publisher(self, *, publisher_id: int) -> List[Rating]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(RatingModel).where(RatingModel.publisher_id == publisher_id)
            )
            return [self._to_entity(db_rating) for db_rating in result.scalars().all()]
