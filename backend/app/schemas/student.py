"""
Schémas Pydantic pour les élèves.
Le contrat JSON utilise des noms camelCase (firstName, dateOfBirth, ...) ;
les requêtes acceptent aussi les noms snake_case.
"""

from datetime import date
from typing import Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.common import NAME_MAX_LENGTH, RecordId


class StudentBase(BaseModel):
    """Champs modifiables communs à la création et à la mise à jour."""
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    email: Optional[EmailStr] = None
    date_of_birth: Optional[date] = None
    department_id: Optional[RecordId] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class StudentCreate(StudentBase):
    """Schéma de création d'un élève (POST /students/createStudent).

    Un éventuel `id` envoyé par le client est ignoré : la base l'attribue.
    """


class StudentUpdate(StudentBase):
    """Schéma de mise à jour complète d'un élève (PUT /students/updateStudent)."""
    id: RecordId


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève."""
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    date_of_birth: Optional[date] = None
    department_id: Optional[int] = None

    # Lecture par nom d'attribut (ORM), sérialisation en camelCase
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )
