"""
Point d'entrée principal de l'API de gestion des élèves.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import app.models  # noqa: F401  enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.database import Base, engine
from app.routers import departments, students

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables si DB_CREATE_TABLES est activé."""
    if settings.DB_CREATE_TABLES:
        logger.info("Création des tables (%s)", engine.url.render_as_string(hide_password=True))
        Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title="Student Management API",
    description="API de gestion des élèves et de leurs départements",
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS : origines localhost en développement, configurable via CORS_ORIGIN_REGEX.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(students.router)
app.include_router(departments.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Les erreurs de validation (corps ou paramètres de chemin) sont renvoyées en 400
    au lieu du 422 par défaut de FastAPI.
    """
    logger.info("Requête invalide %s %s : %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Student Management API", "version": API_VERSION}
