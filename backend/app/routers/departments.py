"""
Router pour les départements.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from app.database import MAX_INTEGER_ID, get_db
from app.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from app.services import department_service
from app.services.exceptions import DuplicateDepartmentError

# Un identifiant hors de la plage INT4 est refusé (400) avant toute requête SQL
IdPath = Annotated[int, Path(ge=1, le=MAX_INTEGER_ID)]

router = APIRouter(prefix="/departments", tags=["Départements"])


@router.get("/getAllDepartments", response_model=List[DepartmentResponse], summary="Lister les départements")
def get_all_departments(db: Session = Depends(get_db)):
    return department_service.get_departments(db)


@router.get("/getDepartmentById/{department_id}", response_model=DepartmentResponse, summary="Détail d'un département")
def get_department_by_id(department_id: IdPath, db: Session = Depends(get_db)):
    department = department_service.get_department(db, department_id)
    if department is None:
        raise HTTPException(status_code=404, detail="Département introuvable.")
    return department


@router.post("/createDepartment", response_model=DepartmentResponse, status_code=201, summary="Créer un département")
def create_department(data: DepartmentCreate, db: Session = Depends(get_db)):
    """Crée un département avec un nom unique."""
    try:
        return department_service.create_department(db, data)
    except DuplicateDepartmentError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/updateDepartment", response_model=DepartmentResponse, summary="Modifier un département")
def update_department(data: DepartmentUpdate, db: Session = Depends(get_db)):
    try:
        department = department_service.update_department(db, data)
    except DuplicateDepartmentError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if department is None:
        raise HTTPException(status_code=404, detail="Département introuvable.")
    return department


@router.delete(
    "/deleteDepartment/{department_id}",
    status_code=200,
    response_class=Response,
    summary="Supprimer un département",
)
def delete_department(department_id: IdPath, db: Session = Depends(get_db)):
    """Supprime un département. Ses élèves sont conservés, sans département."""
    if not department_service.delete_department(db, department_id):
        raise HTTPException(status_code=404, detail="Département introuvable.")
    return Response(status_code=200)
