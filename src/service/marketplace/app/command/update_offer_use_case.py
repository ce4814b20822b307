from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_command_repo import IOfferCommandRepo
from src.service.marketplace.app.interface.i_offer_query_repo import IOfferQueryRepo
from src.service.marketplace.domain.entity.offer_entity import Offer


class UpdateOfferUseCase:
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

    async def _get_owned(self, *, offer_id: UUID, owner_id: int) -> Offer:
        offer = await self.offer_query_repo.get_by_id(offer_id=offer_id)
        if not offer:
            raise NotFoundError('Offer not found')
        if not offer.is_owned_by(owner_id):
            raise ForbiddenError('Only the offer owner can modify this offer')
        return offer

    @Logger.io
    async def update(self, *, offer_id: UUID, owner_id: int, changes: dict[str, Any]) -> Offer:
        offer = await self._get_owned(offer_id=offer_id, owner_id=owner_id)
        if not changes:
            return offer
        return await self.offer_command_repo.update(offer=offer.apply_changes(changes))

