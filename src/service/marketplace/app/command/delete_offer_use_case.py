from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_command_repo import IOfferCommandRepo
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo


class DeleteOfferUseCase:
    """Remove an offer along with its reservations and their ratings."""

    def __init__(
        self, *, offer_command_repo: IOfferCommandRepo, offer_query_repo: IOfferQueryRepo
    ) -> None:
        self.offer_command_repo = offer_command_repo
        self.offer_query_repo = offer_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        offer_command_repo: IOfferCommandRepo = Depends(Provide[Container.offer_command_repo]),
        offer_query_repo: IOfferQueryRepo = Depends(Provide[Container.offer_query_repo]),
    ) -> Self:
        return cls(offer_command_repo=offer_command_repo, offer_query_repo=offer_query_repo)

    @Logger.io
    async def delete(self, *, offer_id: UUID, owner_id: int) -> None:
        offer = await self.offer_query_repo.get_by_id(offer_id=offer_id)
        if not offer:
            raise NotFoundError('Offer not found')
        if not offer.is_owned_by(owner_id):
            raise ForbiddenError('Only the offer owner can delete this offer')

        await self.offer_command_repo.delete(offer_id=offer_id)
        Logger.base.info(f'🗑️ [OFFER] {offer_id} deleted by user {owner_id}')
