"""
Service métier pour les départements.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.student import Student
from app.schemas.department import DepartmentCreate, DepartmentUpdate
from app.services.exceptions import DuplicateDepartmentError

logger = logging.getLogger(__name__)


def get_departments(db: Session) -> list[Department]:
    """Retourne tous les départements, triés par ID."""
    return db.execute(
        select(Department).order_by(Department.id)
    ).scalars().all()


def get_department(db: Session, department_id: int) -> Optional[Department]:
    return db.get(Department, department_id)


def create_department(db: Session, data: DepartmentCreate) -> Department:
    """
    Crée un département.
    Lève DuplicateDepartmentError si le nom existe déjà.
    """
    department = Department(name=data.name, location=data.location)
    db.add(department)
    _commit_or_conflict(db, data.name)
    db.refresh(department)
    logger.info("Département %s créé (%s)", department.id, department.name)
    return department


def update_department(db: Session, data: DepartmentUpdate) -> Optional[Department]:
    """Remplace le nom et la localisation d'un département. None si introuvable."""
    department = db.get(Department, data.id)
    if department is None:
        return None

    department.name = data.name
    department.location = data.location
    _commit_or_conflict(db, data.name)
    db.refresh(department)
    logger.info("Département %s mis à jour (%s)", department.id, department.name)
    return department


def delete_department(db: Session, department_id: int) -> bool:
    """
    Supprime un département. Ses élèves sont détachés (department_id = NULL), jamais supprimés.
    Retourne True si supprimé, False si introuvable.
    """
    department = db.get(Department, department_id)
    if department is None:
        return False

    db.execute(
        update(Student)
        .where(Student.department_id == department_id)
        .values(department_id=None)
    )
    db.delete(department)
    db.commit()
    logger.info("Département %s supprimé", department_id)
    return True


def _commit_or_conflict(db: Session, name: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateDepartmentError(f"Un département avec le nom '{name}' existe déjà.")
