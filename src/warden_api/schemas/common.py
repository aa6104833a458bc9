"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model using camelCase on the wire; snake_case is also accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class StatusResponse(CamelModel):
    status: str = "ok"


class ErrorResponse(CamelModel):
    detail: str
    code: str
