from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_reservation_query_repo import IReservationQueryRepo


class ListReservationsUseCase:
    def __init__(self, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def list_received(self, *, publisher_id: int) -> List[dict]:
        """Reservations made on the publisher's offers"""
        reservations = await self.reservation_query_repo.list_received_with_details(
            publisher_id=publisher_id
        )
        Logger.base.info(
            f'📥 [RESERVATION] {len(reservations)} received by publisher {publisher_id}'
        )
        return reservations

    @Logger.io
    async def list_mine(self, *, subscriber_id: int) -> List[dict]:
        """Reservations the caller made, with their rating if any"""
        return await self.reservation_query_repo.list_mine_with_details(
            subscriber_id=subscriber_id
        )
