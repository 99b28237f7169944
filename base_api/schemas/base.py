"""
Shared Pydantic configuration: camelCase on the wire, snake_case in Python.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request model; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class HealthResponse(CamelModel):
    status: str
    datetime: str
