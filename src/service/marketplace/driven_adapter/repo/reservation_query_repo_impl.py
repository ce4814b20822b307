from typing import Any, AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.marketplace.driven_adapter.model.column_types import from_db_uuid
from src.service.marketplace.driven_adapter.model.offer_model import OfferModel
from src.service.marketplace.driven_adapter.model.rating_model import RatingModel
from src.service.marketplace.driven_adapter.model.reservation_model import ReservationModel


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_dict(
        db_reservation: ReservationModel, db_offer: OfferModel, db_rating: RatingModel | None
    ) -> dict[str, Any]:
        return {
            'id': from_db_uuid(db_reservation.id),
            'offer_id': from_db_uuid(db_reservation.offer_id),
            'subscriber_id': db_reservation.subscriber_id,
            'subscriber_name': db_reservation.subscriber_name,
            'subscriber_email': db_reservation.subscriber_email,
            'subscriber_phone': db_reservation.subscriber_phone,
            'message': db_reservation.message,
            'status': db_reservation.status,
            'created_at': db_reservation.created_at,
            'updated_at': db_reservation.updated_at,
            'offer': {
                'id': from_db_uuid(db_offer.id),
                'title': db_offer.title,
                'price': db_offer.price,
                'store_name': db_offer.store_name,
                'town': db_offer.town,
                'created_by': db_offer.created_by,
            },
            'rating': (
                {'rating': db_rating.rating, 'comment': db_rating.comment}
                if db_rating is not None
                else None
            ),
        }

    def _base_query(self) -> Any:
        return (
            select(ReservationModel, OfferModel, RatingModel)
            .join(OfferModel, OfferModel.id == ReservationModel.offer_id)
            .outerjoin(RatingModel, RatingModel.reservation_id == ReservationModel.id)
            .order_by(ReservationModel.created_at.desc(), ReservationModel.id.desc())
        )

    @Logger.io
    async def list_received_with_details(self, *, publisher_id: int) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._base_query().where(OfferModel.created_by == publisher_id)
            )
            return [self._to_dict(*row) for row in result.all()]

    @Logger.io
    async def list_mine_with_details(self, *, subscriber_id: int) -> List[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._base_query().where(ReservationModel.subscriber_id == subscriber_id)
            )
            return [self._to_dict(*row) for row in result.all()]
