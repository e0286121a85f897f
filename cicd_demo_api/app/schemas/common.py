"""
Shared response envelopes.

Every ``/api`` endpoint wraps its payload in ``{"success": true,
"data": ...}``; listings add a ``count``.  Field names are exposed in
camelCase on the wire while Python code keeps snake_case.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model serialising field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[DataT]):
    success: bool = True
    data: DataT


class ApiListResponse(CamelModel, Generic[DataT]):
    success: bool = True
    data: List[DataT]
    count: int


class MessageResponse(CamelModel):
    success: bool = True
    message: str
