from typing import Any, List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.platform.types import UtilsUUID7
from src.service.marketplace.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.marketplace.app.command.submit_rating_use_case import SubmitRatingUseCase
from src.service.marketplace.app.command.update_reservation_status_use_case import (
    UpdateReservationStatusUseCase,
)
from src.service.marketplace.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_publisher,
)
from src.service.marketplace.driving_adapter.schema.rating_schema import (
    RatingRequest,
    RatingResponse,
)
from src.service.marketplace.driving_adapter.schema.reservation_schema import (
    ReservationCreateRequest,
    ReservationCreatedResponse,
    ReservationDetailResponse,
    ReservationResponse,
)


router = APIRouter()


def _to_detail(row: dict[str, Any]) -> ReservationDetailResponse:
    return ReservationDetailResponse.model_validate(
        {**row, 'status': ReservationStatus(row['status']).value}
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationCreatedResponse:
    reservation = await use_case.create_reservation(
        requester_id=current_user.id or 0,
        offer_id=request.offer_id,
        subscriber_name=request.subscriber_name,
        subscriber_email=request.subscriber_email,
        subscriber_phone=request.subscriber_phone,
        message=request.message,
    )
    return ReservationCreatedResponse(reservation_id=reservation.id)


@router.get('/received', status_code=status.HTTP_200_OK)
@Logger.io
async def list_received_reservations(
    current_user: UserEntity = Depends(require_publisher),
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationDetailResponse]:
    rows = await use_case.list_received(publisher_id=current_user.id or 0)
    return [_to_detail(row) for row in rows]


@router.get('/mine', status_code=status.HTTP_200_OK)
@Logger.io
async def list_my_reservations(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationDetailResponse]:
    rows = await use_case.list_mine(subscriber_id=current_user.id or 0)
    return [_to_detail(row) for row in rows]


@router.patch('/{reservation_id}/confirm', status_code=status.HTTP_200_OK)
@Logger.io
async def confirm_reservation(
    reservation_id: UtilsUUID7,
    current_user: UserEntity = Depends(require_publisher),
    use_case: UpdateReservationStatusUseCase = Depends(UpdateReservationStatusUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.confirm(
        reservation_id=reservation_id, publisher_id=current_user.id or 0
    )
    return ReservationResponse.from_entity(reservation)


@router.patch('/{reservation_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_reservation(
    reservation_id: UtilsUUID7,
    current_user: UserEntity = Depends(require_publisher),
    use_case: UpdateReservationStatusUseCase = Depends(UpdateReservationStatusUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.cancel(
        reservation_id=reservation_id, publisher_id=current_user.id or 0
    )
    return ReservationResponse.from_entity(reservation)


@router.put('/{reservation_id}/rating', status_code=status.HTTP_200_OK)
@Logger.io
async def submit_rating(
    reservation_id: UtilsUUID7,
    request: RatingRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: SubmitRatingUseCase = Depends(SubmitRatingUseCase.depends),
) -> RatingResponse:
    rating = await use_case.submit_rating(
        reservation_id=reservation_id,
        subscriber_id=current_user.id or 0,
        rating=request.rating,
        comment=request.comment,
    )
    return RatingResponse.from_entity(rating)
