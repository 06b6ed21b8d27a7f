"""
Types partagés par les schémas.
"""

from typing import Annotated

from pydantic import Field

from app.database import MAX_INTEGER_ID

# Identifiant de ligne : hors de cette plage, la base lèverait une erreur au lieu de « introuvable »
RecordId = Annotated[int, Field(ge=1, le=MAX_INTEGER_ID)]

# Longueurs alignées sur les colonnes String(n) des modèles
NAME_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 255
