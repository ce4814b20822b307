"""
Pydantic support for uuid_utils.UUID.

Offer, reservation and rating ids are uuid7 values from `uuid_utils`, which pydantic does
not know about. `UtilsUUID7` accepts a uuid_utils.UUID, a stdlib uuid.UUID (what
SQLAlchemy hands back) or a string, and always serializes to the canonical string.
"""

from typing import Any
import uuid

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from uuid_utils import UUID


def _coerce(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, (str, uuid.UUID)):
        try:
            return UUID(str(value))
        except ValueError:
            pass
    raise ValueError(f'Invalid UUID: {value!r}')


class UtilsUUID7(UUID):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'uuid'}
