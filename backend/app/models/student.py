"""
Modèle SQLAlchemy pour la table students.
L'identifiant est attribué par la base à la création et ne change plus ensuite.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, func

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    department_id = Column(
        Integer, ForeignKey("departments.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
