"""Pydantic schemas for hash and algorithm responses"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.entities import AlgorithmInfo, HashResult
from src.domain.enums import PerformanceRating
from src.domain.value_objects import ErrorResponse


class CamelModel(BaseModel):
    """Base schema that serializes field names as camelCase"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class HashResponse(CamelModel):
    """Successful hash computation"""

    original_data: str = Field(..., description="Sanitized text that was hashed")
    algorithm: str = Field(..., description="Canonical algorithm name")
    hex_hash: str = Field(..., description="Lowercase hex digest")
    timestamp: datetime
    computation_time_ms: int = Field(..., ge=0)

    @classmethod
    def from_entity(cls, result: HashResult) -> "HashResponse":
        return cls.model_validate(result)


class AlgorithmResponse(CamelModel):
    """Discovery entry for one supported algorithm"""

    name: str
    secure: bool
    performance_rating: PerformanceRating
    description: str
    aliases: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, info: AlgorithmInfo) -> "AlgorithmResponse":
        return cls(
            name=info.name,
            secure=info.secure,
            performance_rating=info.performance_rating,
            description=info.description,
            aliases=sorted(info.aliases),
        )


class ErrorResponseSchema(CamelModel):
    """Failure payload safe for external disclosure"""

    status: int = Field(..., ge=100, le=599)
    message: str
    correlation_id: str
    timestamp: datetime

    @classmethod
    def from_entity(cls, error: ErrorResponse) -> "ErrorResponseSchema":
        return cls.model_validate(error)
