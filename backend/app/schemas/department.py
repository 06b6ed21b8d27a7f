"""
Schémas Pydantic pour les départements.
"""

from typing import Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.common import LOCATION_MAX_LENGTH, NAME_MAX_LENGTH, RecordId


class DepartmentCreate(BaseModel):
    name: str = Field(max_length=NAME_MAX_LENGTH)
    location: Optional[str] = Field(default=None, max_length=LOCATION_MAX_LENGTH)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom du département ne peut pas être vide.")
        return v.strip()


class DepartmentUpdate(DepartmentCreate):
    id: RecordId


class DepartmentResponse(BaseModel):
    id: int
    name: str
    location: Optional[str] = None

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )
