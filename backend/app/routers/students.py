"""
Router pour les élèves.
GET    /students/getAllStudents         : liste complète
GET    /students/getStudentById/{id}    : détail
POST   /students/createStudent          : création
PUT    /students/updateStudent          : mise à jour (id dans le corps)
DELETE /students/deleteStudent/{id}     : suppression
GET    /students/department/{id}        : élèves d'un département
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from app.database import MAX_INTEGER_ID, get_db
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services import student_service
from app.services.exceptions import DepartmentNotFoundError, DuplicateEmailError

# Un identifiant hors de la plage INT4 est refusé (400) avant toute requête SQL
IdPath = Annotated[int, Path(ge=1, le=MAX_INTEGER_ID)]

router = APIRouter(prefix="/students", tags=["Élèves"])


@router.get("/getAllStudents", response_model=List[StudentResponse], summary="Lister tous les élèves")
def get_all_students(db: Session = Depends(get_db)):
    """Retourne tous les élèves dans l'ordre de création."""
    return student_service.get_all_students(db)


@router.get("/getStudentById/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student_by_id(student_id: IdPath, db: Session = Depends(get_db)):
    student = student_service.get_student_by_id(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail=f"Élève introuvable : {student_id}.")
    return student


@router.post("/createStudent", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    """Crée un élève. L'identifiant est attribué par la base."""
    try:
        return student_service.save_student(db, data)
    except DepartmentNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateEmailError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/updateStudent", response_model=StudentResponse, summary="Modifier un élève")
def update_student(data: StudentUpdate, db: Session = Depends(get_db)):
    """Remplace tous les champs modifiables de l'élève désigné par `id`. L'id n'est jamais modifié."""
    try:
        student = student_service.save_student(db, data)
    except DepartmentNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateEmailError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail=f"Élève introuvable : {data.id}.")
    return student


@router.delete("/deleteStudent/{student_id}", status_code=200, response_class=Response, summary="Supprimer un élève")
def delete_student(student_id: IdPath, db: Session = Depends(get_db)):
    """Supprime définitivement un élève. Réponse 200 sans corps."""
    if not student_service.delete_student(db, student_id):
        raise HTTPException(status_code=404, detail=f"Élève introuvable : {student_id}.")
    return Response(status_code=200)


@router.get(
    "/department/{department_id}",
    response_model=List[StudentResponse],
    summary="Lister les élèves d'un département",
)
def get_students_by_department(department_id: IdPath, db: Session = Depends(get_db)):
    """Retourne les élèves du département ; liste vide s'il n'en a aucun."""
    return student_service.get_students_by_department(db, department_id)
