"""
Configuration de la connexion à la base de données.
PostgreSQL par défaut, SQLite accepté pour le développement local.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

# SQLite refuse par défaut le partage d'une connexion entre threads (TestClient, uvicorn)
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Borne haute des colonnes Integer (INT4 sous PostgreSQL)
MAX_INTEGER_ID = 2_147_483_647


def get_db():
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
