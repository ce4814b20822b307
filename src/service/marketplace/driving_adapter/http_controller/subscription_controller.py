from typing import Optional

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.upsert_subscription_use_case import (
    UpsertSubscriptionUseCase,
)
from src.service.marketplace.app.query.get_subscription_use_case import GetSubscriptionUseCase
from src.service.marketplace.domain.entity.subscription_entity import Subscription
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    require_subscriber,
)
from src.service.marketplace.driving_adapter.schema.subscription_schema import (
    SubscriptionRequest,
    SubscriptionResponse,
)


router = APIRouter()


def _to_response(subscription: Subscription) -> SubscriptionResponse:
    return SubscriptionResponse(
        user_id=subscription.user_id,
        town=subscription.town,
        categories=[category.value for category in subscription.categories],
        updated_at=subscription.updated_at,
    )


@router.put('', status_code=status.HTTP_200_OK)
@Logger.io
async def upsert_subscription(
    request: SubscriptionRequest,
    current_user: UserEntity = Depends(require_subscriber),
    use_case: UpsertSubscriptionUseCase = Depends(UpsertSubscriptionUseCase.depends),
) -> SubscriptionResponse:
    subscription = await use_case.upsert(
        user_id=current_user.id or 0, town=request.town, categories=request.categories
    )
    return _to_response(subscription)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_subscription(
    current_user: UserEntity = Depends(require_subscriber),
    use_case: GetSubscriptionUseCase = Depends(GetSubscriptionUseCase.depends),
) -> Optional[SubscriptionResponse]:
    subscription = await use_case.get(user_id=current_user.id or 0)
    return _to_response(subscription) if subscription else None
