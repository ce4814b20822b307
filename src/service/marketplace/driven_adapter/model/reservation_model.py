from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.marketplace.domain.enum.reservation_status import ReservationStatus
from src.service.marketplace.driven_adapter.model.column_types import closed_enum


class ReservationModel(Base):
    __tablename__ = 'reservation'

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    offer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('offer.id', ondelete='CASCADE'), nullable=False, index=True
    )
    subscriber_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    subscriber_name: Mapped[str] = mapped_column(String(100), nullable=False)
    subscriber_email: Mapped[str] = mapped_column(String(255), nullable=False)
    subscriber_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[ReservationStatus] = mapped_column(
        closed_enum(ReservationStatus, length=20),
        default=ReservationStatus.PENDING,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
