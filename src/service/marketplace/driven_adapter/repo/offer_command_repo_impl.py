from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import NotFoundError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_command_repo import IOfferCommandRepo
from src.service.marketplace.domain.entity.offer_entity import EDITABLE_FIELDS, Offer
from src.service.marketplace.driven_adapter.model.column_types import to_db_uuid
from src.service.marketplace.driven_adapter.model.offer_model import OfferModel
from src.service.marketplace.driven_adapter.model.rating_model import RatingModel
from src.service.marketplace.driven_adapter.model.reservation_model import ReservationModel
from src.service.marketplace.driven_adapter.repo.offer_mapper import (
    offer_to_entity,
    offer_to_model,
)


class OfferCommandRepoImpl(IOfferCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, offer: Offer) -> Offer:
        async with self.session_factory() as session:
            db_offer = offer_to_model(offer)
            session.add(db_offer)
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(f'Failed to create offer {offer.id}: {e}') from e
            await session.refresh(db_offer)
            return offer_to_entity(db_offer)

    @Logger.io
    async def update(self, *, offer: Offer) -> Offer:
        async with self.session_factory() as session:
            db_offer = await session.get(OfferModel, to_db_uuid(offer.id))
            if db_offer is None:
                raise NotFoundError('Offer not found')
            for name in EDITABLE_FIELDS:
                setattr(db_offer, name, getattr(offer, name))
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(f'Failed to update offer {offer.id}: {e}') from e
            await session.refresh(db_offer)
            return offer_to_entity(db_offer)

    @Logger.io
    async def delete(self, *, offer_id: UUID) -> None:
        db_offer_id = to_db_uuid(offer_id)
        reservation_ids = select(ReservationModel.id).where(
            ReservationModel.offer_id == db_offer_id
        )
        async with self.session_factory() as session:
            try:
                # Explicit deletes so SQLite (no FK enforcement by default) behaves like Postgres
                await session.execute(
                    delete(RatingModel).where(RatingModel.reservation_id.in_(reservation_ids))
                )
                await session.execute(
                    delete(ReservationModel).where(ReservationModel.offer_id == db_offer_id)
                )
                await session.execute(delete(OfferModel).where(OfferModel.id == db_offer_id))
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(f'Failed to delete offer {offer_id}: {e}') from e
