# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# students.department_id → departments.id exige que department.py soit chargé.

from app.models.department import Department  # noqa: F401  doit précéder student
from app.models.student import Student  # noqa: F401
