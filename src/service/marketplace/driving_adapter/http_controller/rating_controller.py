from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.query.get_publisher_rating_use_case import (
    GetPublisherRatingUseCase,
)
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from src.service.marketplace.driving_adapter.schema.rating_schema import PublisherRatingResponse


router = APIRouter()


@router.get('/publisher/{publisher_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_publisher_rating(
    publisher_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetPublisherRatingUseCase = Depends(GetPublisherRatingUseCase.depends),
) -> PublisherRatingResponse:
    score = await use_case.average_rating(publisher_id=publisher_id)
    return PublisherRatingResponse(
        publisher_id=score.publisher_id, average=score.average, count=score.count
    )
