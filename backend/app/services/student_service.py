"""
Service métier pour la gestion des élèves.

L'absence d'un élève est signalée par None (lecture, mise à jour) ou False
(suppression) ; la traduction en 404 revient au router.
"""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.exceptions import DepartmentNotFoundError, DuplicateEmailError

logger = logging.getLogger(__name__)


def get_all_students(db: Session) -> list[Student]:
    """Retourne tous les élèves dans l'ordre de création."""
    return db.execute(
        select(Student).order_by(Student.id)
    ).scalars().all()


def get_student_by_id(db: Session, student_id: int) -> Optional[Student]:
    """Retourne un élève par son ID, ou None si inexistant."""
    return db.get(Student, student_id)


def save_student(db: Session, data: Union[StudentCreate, StudentUpdate]) -> Optional[Student]:
    """
    Crée un élève (StudentCreate) ou remplace les champs d'un élève existant (StudentUpdate).

    Retourne l'élève persisté avec son ID, ou None si l'ID à mettre à jour n'existe pas.
    Lève DepartmentNotFoundError si le département référencé n'existe pas,
    DuplicateEmailError si l'email est déjà utilisé.
    """
    if isinstance(data, StudentUpdate):
        student = db.get(Student, data.id)
        if student is None:
            return None
    else:
        student = None

    if data.department_id is not None and db.get(Department, data.department_id) is None:
        raise DepartmentNotFoundError(f"Département introuvable : {data.department_id}.")

    if student is None:
        student = Student()
        db.add(student)

    # L'id n'est jamais recopié depuis la requête
    for field, value in data.model_dump(exclude={"id"}).items():
        setattr(student, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Le département a pu être supprimé entre la vérification et le commit
        if data.department_id is not None and db.get(Department, data.department_id) is None:
            raise DepartmentNotFoundError(f"Département introuvable : {data.department_id}.")
        if data.email is None:
            raise
        logger.warning("Email déjà utilisé : %s", data.email)
        raise DuplicateEmailError(f"Un élève avec l'email '{data.email}' existe déjà.")
    db.refresh(student)

    logger.info(
        "Élève %s %s (%s %s)",
        student.id,
        "mis à jour" if isinstance(data, StudentUpdate) else "créé",
        student.first_name,
        student.last_name,
    )
    return student


def delete_student(db: Session, student_id: int) -> bool:
    """Supprime un élève. Retourne True si supprimé, False si introuvable."""
    student = db.get(Student, student_id)
    if student is None:
        return False
    db.delete(student)
    db.commit()
    logger.info("Élève %s supprimé", student_id)
    return True


def get_students_by_department(db: Session, department_id: int) -> list[Student]:
    """
    Retourne les élèves d'un département dans l'ordre de création.
    Liste vide si le département n'a aucun élève ou n'existe pas.
    """
    return db.execute(
        select(Student)
        .where(Student.department_id == department_id)
        .order_by(Student.id)
    ).scalars().all()
