from datetime import datetime
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import NotFoundError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.marketplace.domain.entity.reservation_entity import Reservation
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus
from src.service.marketplace.driven_adapter.model.column_types import from_db_uuid, to_db_uuid
from src.service.marketplace.driven_adapter.model.reservation_model import ReservationModel


def reservation_to_entity(db_reservation: ReservationModel) -> Reservation:
    return Reservation(
        id=from_db_uuid(db_reservation.id),
        offer_id=from_db_uuid(db_reservation.offer_id),
        subscriber_id=db_reservation.subscriber_id,
        subscriber_name=db_reservation.subscriber_name,
        subscriber_email=db_reservation.subscriber_email,
        subscriber_phone=db_reservation.subscriber_phone,
        message=db_reservation.message,
        status=ReservationStatus(db_reservation.status),
        created_at=db_reservation.created_at,
        updated_at=db_reservation.updated_at,
    )


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, reservation_id: UUID) -> Optional[Reservation]:
        async with self.session_factory() as session:
            db_reservation = await session.get(ReservationModel, to_db_uuid(reservation_id))
            return reservation_to_entity(db_reservation) if db_reservation else None

    @Logger.io
    async def insert(self, *, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            db_reservation = ReservationModel(
                id=to_db_uuid(reservation.id),
                offer_id=to_db_uuid(reservation.offer_id),
                subscriber_id=reservation.subscriber_id,
                subscriber_name=reservation.subscriber_name,
                subscriber_email=reservation.subscriber_email,
                subscriber_phone=reservation.subscriber_phone,
                message=reservation.message,
                status=reservation.status,
                created_at=reservation.created_at,
                updated_at=reservation.updated_at,
            )
            session.add(db_reservation)
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(
                    f'Failed to insert reservation {reservation.id}: {e}'
                ) from e
            await session.refresh(db_reservation)
            return reservation_to_entity(db_reservation)

    @Logger.io
    async def update_status(
        self, *, reservation_id: UUID, status: ReservationStatus, updated_at: datetime
    ) -> Reservation:
        async with self.session_factory() as session:
            db_reservation = await session.get(ReservationModel, to_db_uuid(reservation_id))
            if db_reservation is None:
                raise NotFoundError('Reservation not found')
            db_reservation.status = status
            db_reservation.updated_at = updated_at
            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                raise PersistenceError(
                    f'Failed to update reservation {reservation_id}: {e}'
                ) from e
            await session.refresh(db_reservation)
            return reservation_to_entity(db_reservation)
