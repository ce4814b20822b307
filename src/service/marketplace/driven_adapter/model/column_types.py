from enum import Enum as PyEnum
from typing import Type
import uuid

from sqlalchemy import Enum
import uuid_utils


def closed_enum(enum_cls: Type[PyEnum], *, length: int = 30) -> Enum:
    """Store enum values as plain strings, refusing anything outside the enum on write."""
    return Enum(
        enum_cls,
        native_enum=False,
        validate_strings=True,
        values_callable=lambda members: [member.value for member in members],
        length=length,
    )


def to_db_uuid(value: uuid_utils.UUID | uuid.UUID | str) -> uuid.UUID:
    """Domain ids are uuid_utils.UUID; SQLAlchemy's Uuid type binds stdlib uuid.UUID"""
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def from_db_uuid(value: uuid.UUID | str) -> uuid_utils.UUID:
    return uuid_utils.UUID(str(value))
