from datetime import date
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_offer_command_repo import IOfferCommandRepo
from src.service.marketplace.domain.entity.offer_entity import Offer


class CreateOfferUseCase:
    def __init__(self, offer_command_repo: IOfferCommandRepo) -> None:
        self.offer_command_repo = offer_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        offer_command_repo: IOfferCommandRepo = Depends(Provide[Container.offer_command_repo]),
    ) -> Self:
        return cls(offer_command_repo=offer_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        created_by: int,
        title: str,
        category: str,
        town: str,
        price: Decimal,
        store_name: str,
        contact: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        size: Optional[str] = None,
        expires_at: Optional[date] = None,
    ) -> Offer:
        offer = Offer.create(
            created_by=created_by,
            title=title,
            category=category,
            town=town,
            price=price,
            store_name=store_name,
            contact=contact,
            description=description,
            image_url=image_url,
            size=size,
            expires_at=expires_at,
        )
        created = await self.offer_command_repo.create(offer=offer)
        Logger.base.info(f'🏷️ [OFFER] {created.id} published by user {created_by} in {created.town}')
        return created
