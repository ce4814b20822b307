from typing import List

from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.platform.types import UtilsUUID7
from src.service.marketplace.app.command.create_offer_use_case import CreateOfferUseCase
from src.service.marketplace.app.command.delete_offer_use_case import DeleteOfferUseCase
from src.service.marketplace.app.command.update_offer_use_case import UpdateOfferUseCase
from src.service.marketplace.app.query.list_offers_use_case import ListOffersUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_publisher,
    require_subscriber,
)
from src.service.marketplace.driving_adapter.schema.offer_schema import (
    OfferCreateRequest,
    OfferResponse,
    OfferUpdateRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_offer(
    request: OfferCreateRequest,
    current_user: UserEntity = Depends(require_publisher),
    use_case: CreateOfferUseCase = Depends(CreateOfferUseCase.depends),
) -> OfferResponse:
    offer = await use_case.create(created_by=current_user.id or 0, **request.model_dump())
    return OfferResponse.from_entity(offer)


@router.get('/mine', status_code=status.HTTP_200_OK)
@Logger.io
async def list_my_offers(
    current_user: UserEntity = Depends(require_publisher),
    use_case: ListOffersUseCase = Depends(ListOffersUseCase.depends),
) -> List[OfferResponse]:
    offers = await use_case.list_mine(owner_id=current_user.id or 0)
    return [OfferResponse.from_entity(offer) for offer in offers]


@router.get('/feed', status_code=status.HTTP_200_OK)
@Logger.io
async def list_feed(
    only_active: bool = False,
    current_user: UserEntity = Depends(require_subscriber),
    use_case: ListOffersUseCase = Depends(ListOffersUseCase.depends),
) -> List[OfferResponse]:
    """Offers in the subscriber's town and categories, newest first."""
    offers = await use_case.list_feed(subscriber_id=current_user.id or 0, only_active=only_active)
    return [OfferResponse.from_entity(offer) for offer in offers]


@router.get('/{offer_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_offer(
    offer_id: UtilsUUID7,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListOffersUseCase = Depends(ListOffersUseCase.depends),
) -> OfferResponse:
    return OfferResponse.from_entity(await use_case.get_by_id(offer_id=offer_id))


@router.patch('/{offer_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_offer(
    offer_id: UtilsUUID7,
    request: OfferUpdateRequest,
    current_user: UserEntity = Depends(require_publisher),
    use_case: UpdateOfferUseCase = Depends(UpdateOfferUseCase.depends),
) -> OfferResponse:
    offer = await use_case.update(
        offer_id=offer_id,
        owner_id=current_user.id or 0,
        changes=request.model_dump(exclude_unset=True),
    )
    return OfferResponse.from_entity(offer)


@router.delete('/{offer_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_offer(
    offer_id: UtilsUUID7,
    current_user: UserEntity = Depends(require_publisher),
    use_case: DeleteOfferUseCase = Depends(DeleteOfferUseCase.depends),
) -> Response:
    await use_case.delete(offer_id=offer_id, owner_id=current_user.id or 0)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
